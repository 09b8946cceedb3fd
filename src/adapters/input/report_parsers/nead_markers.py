"""
Marcadores visuais do relatório de repasse NEAD.

O relatório não tem esquema semântico: polos, seções e totais só se
distinguem pelo estilo inline das células. Cada heurística é um predicado
nomeado sobre um nó da árvore (bs4.Tag), testável isoladamente:

    is_polo_header(row)        → 1ª célula com fundo cinza #BFBFBF
    find_section_title(row)    → td colspan=4, font-size:20px, em negrito
    find_total_label(row)      → <b> dentro de td com "TOTAL" ou "VALOR"
    classify_category(title)   → chave da categoria a partir do título
    classify_total_label(text) → qual total do polo o rótulo preenche

Também ficam aqui os acessores de texto e de linhas de tabela usados pelos
extratores.
"""

from bs4 import Tag

from src.domain.shared.text_cleaner import clean_whitespace, strip_accents

POLO_HEADER_BACKGROUND = "BACKGROUND:#BFBFBF"
SECTION_TITLE_SELECTOR = 'td[colspan="4"][style*="font-size:20px"]'
RESUMO_LABEL = "RESUMO"

CATEGORIA_DESCONTO = "DESCONTO"
CATEGORIA_RECEITA_GRADUACAO = "RECEITA_GRADUACAO"
CATEGORIA_RECEITA_POS_GRADUACAO = "RECEITA_POS_GRADUACAO"
CATEGORIA_RECEITA_TECNICO = "RECEITA_TECNICO"
CATEGORIA_RECEITA_PROFISSIONALIZANTE = "RECEITA_PROFISSIONALIZANTE"
CATEGORIA_RECEITA_UNIVERSO_EAD = "RECEITA_UNIVERSO_EAD"

# Ordem importa: o primeiro termo contido no título vence.
# Os termos já estão sem acento; o título é comparado sem acento também.
_CATEGORY_KEYWORDS: list[tuple[str, str]] = [
    ("DESCONTOS", CATEGORIA_DESCONTO),
    ("RECEITA GRADUACAO", CATEGORIA_RECEITA_GRADUACAO),
    ("RECEITA POS-GRADUACAO", CATEGORIA_RECEITA_POS_GRADUACAO),
    ("RECEITA TECNICO", CATEGORIA_RECEITA_TECNICO),
    ("RECEITA PROFISSIONALIZANTE", CATEGORIA_RECEITA_PROFISSIONALIZANTE),
    ("RECEITA UNIVERSO EAD", CATEGORIA_RECEITA_UNIVERSO_EAD),
]

TOTAL_BRUTO = "total_bruto"
TOTAL_DESCONTOS = "total_descontos"
TOTAL_LIQUIDO = "total_liquido"

_TOTAL_LABELS: list[tuple[tuple[str, ...], str]] = [
    (("TOTAL NF", "VALOR NF"), TOTAL_BRUTO),
    (("TOTAL DESCONTOS", "DESCONTOS", "VALOR DESCONTO"), TOTAL_DESCONTOS),
    (("TOTAL VALOR LÍQUIDO", "TOTAL VALOR LIQUIDO", "VALOR REPASSE"), TOTAL_LIQUIDO),
]


# =================================================================
# Acessores
# =================================================================


def cell_text(element: Tag | None) -> str:
    """Texto do elemento com espaços normalizados. "" para None."""
    if element is None:
        return ""
    return clean_whitespace(element.get_text())


def style_declarations(element: Tag) -> dict[str, str]:
    """Lê o atributo style como {propriedade: valor}, tudo em minúsculas.

    Exemplo:
        'font-size: 20px; FONT-WEIGHT:bold' → {'font-size': '20px', 'font-weight': 'bold'}
    """
    declarations: dict[str, str] = {}
    for part in (element.get("style") or "").split(";"):
        if ":" not in part:
            continue
        prop, _, value = part.partition(":")
        declarations[prop.strip().lower()] = value.strip().lower()
    return declarations


def direct_rows(table: Tag) -> list[Tag]:
    """Linhas que pertencem diretamente à tabela, na ordem do documento.

    Inclui os <tr> filhos de <tbody> e os <tr> filhos diretos da tabela
    (o parser lxml não cria o <tbody> implícito que o navegador cria).
    Não desce em tabelas aninhadas nem em <thead>.
    """
    rows: list[Tag] = []
    for child in table.find_all(["tr", "tbody"], recursive=False):
        if child.name == "tr":
            rows.append(child)
        else:
            rows.extend(child.find_all("tr", recursive=False))
    return rows


# =================================================================
# Predicados
# =================================================================


def is_polo_header(row: Tag) -> bool:
    """Linha de cabeçalho de polo: a primeira célula tem fundo #BFBFBF."""
    first_cell = row.find("td")
    if first_cell is None:
        return False
    style = (first_cell.get("style") or "").replace(" ", "").upper()
    return POLO_HEADER_BACKGROUND in style


def is_bold(element: Tag) -> bool:
    """Negrito por estilo inline (font-weight:bold) ou por um <b> interno."""
    if style_declarations(element).get("font-weight") == "bold":
        return True
    return element.find("b") is not None


def find_section_title(row: Tag) -> Tag | None:
    """Célula de título de seção (ex.: "RECEITA GRADUAÇÃO"), ou None.

    O título RESUMO tem o mesmo estilo, mas não abre seção de dados:
    é tratado pelo extrator da grade de conferência.
    """
    candidate = row.select_one(SECTION_TITLE_SELECTOR)
    if candidate is None or not is_bold(candidate):
        return None
    if cell_text(candidate).upper() == RESUMO_LABEL:
        return None
    return candidate


def classify_category(title: str) -> str | None:
    """Chave da categoria a partir do texto do título, ou None se desconhecido.

    Exemplos:
        >>> classify_category("RECEITA GRADUAÇÃO")
        'RECEITA_GRADUACAO'
        >>> classify_category("Receita Pos-Graduacao")
        'RECEITA_POS_GRADUACAO'
        >>> classify_category("OUTRA COISA") is None
        True
    """
    normalized = strip_accents(title).upper()
    for keyword, category in _CATEGORY_KEYWORDS:
        if keyword in normalized:
            return category
    return None


def find_total_label(row: Tag) -> Tag | None:
    """Primeiro <b> dentro de td cujo texto contém "TOTAL" ou "VALOR"."""
    for bold in row.select("td b"):
        text = cell_text(bold)
        if "TOTAL" in text or "VALOR" in text:
            return bold
    return None


def total_value_cell(label: Tag) -> Tag | None:
    """Célula irmã seguinte à célula que contém o rótulo de total."""
    parent = label.parent
    if parent is None:
        return None
    return parent.find_next_sibling()


def classify_total_label(label: str) -> str | None:
    """Qual total do polo um rótulo preenche, ou None.

    Exemplos:
        >>> classify_total_label("TOTAL NF")
        'total_bruto'
        >>> classify_total_label("VALOR REPASSE")
        'total_liquido'
    """
    upper = label.upper()
    for patterns, field_name in _TOTAL_LABELS:
        if any(pattern in upper for pattern in patterns):
            return field_name
    return None
