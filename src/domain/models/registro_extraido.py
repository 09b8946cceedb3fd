"""
Modelos de extração: linhas brutas lidas das tabelas aninhadas do relatório.

Existem apenas durante uma chamada de parse. Todos os campos são o texto
da célula, já com espaços normalizados, mas SEM conversão numérica: a
normalização de valores e parcelas acontece no transformador de registros.
"""

from dataclasses import dataclass

TIPO_LANCAMENTO_DESCONTO = "despesa_operacional"


@dataclass
class RegistroExtraido:
    """Uma linha de cobrança de aluno (mensalidade, acordo, serviço)."""

    id_sequencial: str = ""
    ra_codigo: str = ""
    """RA do aluno. No layout Universo EAD esta coluna traz o CPF."""

    nome_aluno: str = ""
    curso: str = ""
    sigla_curso: str = ""
    polo_aluno: str = ""
    """Polo declarado pelo aluno. Pode vir vazio ou como código numérico."""

    data_ingresso: str = ""
    tipo_lancamento: str = ""
    parcela: str = ""
    vencimento: str = ""
    pagamento: str = ""
    valor_bruto: str = ""
    valor_liquido: str = ""


@dataclass
class DescontoExtraido:
    """Uma linha da seção DESCONTOS."""

    descricao: str = ""
    parcela: str = ""
    vencimento: str = ""
    pagamento: str = ""
    valor_bruto: str = ""
    valor_liquido: str = ""
    tipo_lancamento: str = TIPO_LANCAMENTO_DESCONTO
