"""
Modelo de domínio: Registro financeiro canônico.

É a saída do pipeline: uma linha pronta para gravação e agregação
(dashboards de receita, repasse e lucratividade por polo).

Decisões de modelagem:
- `Decimal` para valores, nunca float.
- `tipo` pertence a um conjunto fechado (TIPOS_VALIDOS). O transformador
  normaliza o texto do relatório antes de criar o registro.
- Valores são sempre >= 0. O sentido (receita ou desconto) está no `tipo`.
"""

from dataclasses import dataclass
from decimal import Decimal

TIPO_MENSALIDADE = "Mensalidade"
TIPO_ACORDO = "Acordo"
TIPO_SERVICO = "Serviço"
TIPO_DESCONTOS = "Descontos"

TIPOS_VALIDOS: tuple[str, ...] = (TIPO_MENSALIDADE, TIPO_ACORDO, TIPO_SERVICO, TIPO_DESCONTOS)

CATEGORIA_GRADUACAO = "Receita Graduação"
CATEGORIA_POS_GRADUACAO = "Receita Pós-Graduação"
CATEGORIA_TECNICO = "Receita Técnico"
CATEGORIA_PROFISSIONALIZANTES = "Receita Profissionalizantes"
CATEGORIA_OUTRAS_RECEITAS = "Outras Receitas"

IMPORTACAO_NEAD = "NEAD"
IMPORTACAO_ARQUIVO = "Arquivo"

TIPOS_IMPORTACAO: tuple[str, ...] = (IMPORTACAO_NEAD, IMPORTACAO_ARQUIVO)


@dataclass(frozen=True)
class RegistroFinanceiro:
    """Um lançamento financeiro normalizado.

    frozen=True: depois de criado, o registro não muda. A gravação e a
    exclusão são responsabilidade do armazenamento externo.
    """

    polo: str
    categoria: str
    tipo: str
    parcela: int

    valor_pago: Decimal
    """Valor bruto pago pelo aluno."""

    valor_repasse: Decimal
    """Valor líquido repassado ao polo."""

    referencia_mes: int
    referencia_ano: int

    import_id: str
    """Identificador do lote: igual para todos os registros de um mesmo parse."""

    nome_arquivo: str
    tipo_importacao: str
    sigla_curso: str | None = None

    def __post_init__(self) -> None:
        if self.tipo not in TIPOS_VALIDOS:
            raise ValueError(f"Tipo não reconhecido: '{self.tipo}'. Esperado: {TIPOS_VALIDOS}")
        if self.tipo_importacao not in TIPOS_IMPORTACAO:
            raise ValueError(f"Tipo de importação não reconhecido: '{self.tipo_importacao}'")
        if not 1 <= self.referencia_mes <= 12:
            raise ValueError(f"Mês fora do intervalo: {self.referencia_mes}. Deve ser 1-12.")
        if self.valor_pago < Decimal("0"):
            raise ValueError(f"valor_pago não pode ser negativo: {self.valor_pago}")
        if self.valor_repasse < Decimal("0"):
            raise ValueError(f"valor_repasse não pode ser negativo: {self.valor_repasse}")
