"""
Extração das linhas das tabelas aninhadas (table.rRelatorio dentro da
linha seguinte a um título de seção).

O relatório não tem cabeçalhos confiáveis: cada layout é um mapeamento
fixo campo → índice de coluna. Uma mudança de layout no sistema de origem
é uma edição de uma linha na tabela correspondente.

Três layouts:
- DESCONTOS             ≥ 13 colunas
- Receita genérica      ≥ 13 colunas (graduação, pós, técnico, profissionalizante)
- Receita Universo EAD  ≥ 14 colunas: colunas deslocadas em uma posição,
                        CPF no lugar do RA e polo do aluno numa coluna composta

Linhas curtas são ignoradas sem aviso: o relatório completa as tabelas com
linhas vazias.
"""

import re

from bs4 import Tag

from src.adapters.input.report_parsers.nead_markers import cell_text
from src.domain.models.registro_extraido import DescontoExtraido, RegistroExtraido

# =================================================================
# Layouts (campo → índice da coluna)
# =================================================================

LAYOUT_DESCONTO: dict[str, int] = {
    "descricao": 2,
    "parcela": 8,
    "vencimento": 9,
    "pagamento": 10,
    "valor_bruto": 11,
    "valor_liquido": 12,
}
MIN_COLUNAS_DESCONTO = 13

LAYOUT_RECEITA: dict[str, int] = {
    "id_sequencial": 0,
    "ra_codigo": 1,
    "nome_aluno": 2,
    "curso": 3,
    "polo_aluno": 5,
    "data_ingresso": 6,
    "tipo_lancamento": 7,
    "parcela": 8,
    "vencimento": 9,
    "pagamento": 10,
    "valor_bruto": 11,
    "valor_liquido": 12,
}
MIN_COLUNAS_RECEITA = 13

LAYOUT_UNIVERSO_EAD: dict[str, int] = {
    "id_sequencial": 0,
    "ra_codigo": 1,  # CPF do aluno
    "nome_aluno": 2,
    "curso": 4,  # tipo de curso; serve também de sigla
    "polo_aluno": 6,  # coluna composta "POLO DO ALUNO"
    "tipo_lancamento": 7,
    "parcela": 9,
    "vencimento": 10,
    "pagamento": 11,
    "valor_bruto": 12,
    "valor_liquido": 13,
}
MIN_COLUNAS_UNIVERSO_EAD = 14

_SIGLA_PATTERN = re.compile(r"\((.*?)\)")
_SIGLA_REMOVAL = re.compile(r"\s*\(.*?\)\s*")


# =================================================================
# Funções auxiliares
# =================================================================


def data_cells(row: Tag) -> list[Tag]:
    """Todas as células <td> da linha, como o relatório as entrega."""
    return row.find_all("td")


def read_layout(cells: list[Tag], layout: dict[str, int]) -> dict[str, str]:
    """Lê o texto de cada campo do layout a partir da lista de células."""
    return {campo: cell_text(cells[indice]) for campo, indice in layout.items()}


def split_course(curso_completo: str) -> tuple[str, str]:
    """Separa "NOME (SIGLA)" em (nome, sigla).

    Sem parênteses, nome e sigla são o texto inteiro.

    Exemplos:
        >>> split_course("ADMINISTRAÇÃO (ADM)")
        ('ADMINISTRAÇÃO', 'ADM')
        >>> split_course("PEDAGOGIA")
        ('PEDAGOGIA', 'PEDAGOGIA')
    """
    match = _SIGLA_PATTERN.search(curso_completo)
    if not match:
        return curso_completo, curso_completo
    nome = _SIGLA_REMOVAL.sub("", curso_completo, count=1).strip()
    return nome, match.group(1)


# =================================================================
# Extratores por layout
# =================================================================


def extrair_desconto(row: Tag) -> DescontoExtraido | None:
    """Linha da seção DESCONTOS, ou None se a linha for curta."""
    cells = data_cells(row)
    if len(cells) < MIN_COLUNAS_DESCONTO:
        return None
    return DescontoExtraido(**read_layout(cells, LAYOUT_DESCONTO))


def extrair_receita(row: Tag) -> RegistroExtraido | None:
    """Linha de receita no layout genérico, ou None se a linha for curta."""
    cells = data_cells(row)
    if len(cells) < MIN_COLUNAS_RECEITA:
        return None
    campos = read_layout(cells, LAYOUT_RECEITA)
    curso, sigla = split_course(campos.pop("curso"))
    return RegistroExtraido(curso=curso, sigla_curso=sigla, **campos)


def extrair_receita_universo_ead(row: Tag) -> RegistroExtraido | None:
    """Linha de receita Universo EAD, ou None se a linha for curta.

    O polo do aluno vem da coluna composta 6, apenas aparada. Não há data
    de ingresso neste layout.
    """
    cells = data_cells(row)
    if len(cells) < MIN_COLUNAS_UNIVERSO_EAD:
        return None
    campos = read_layout(cells, LAYOUT_UNIVERSO_EAD)
    campos["polo_aluno"] = campos["polo_aluno"].strip()
    return RegistroExtraido(sigla_curso=campos["curso"], data_ingresso="", **campos)
