"""
Extração da grade de conferência RESUMO de um polo.

Recebe o HTML bruto acumulado durante o bloco do polo, reembrulha numa
tabela independente e procura a âncora "RESUMO". A grade é consultiva:
sem âncora, devolve a grade padrão zerada (encontrado=False), nunca um erro.
"""

from bs4 import BeautifulSoup, Tag

from src.adapters.input.report_parsers.nead_markers import RESUMO_LABEL, cell_text
from src.domain.models.resumo_categorias import (
    NUM_CATEGORIAS_RESUMO,
    VALOR_PADRAO_RESUMO,
    ItemResumo,
    ResumoCategorias,
)

# Rótulo da primeira célula → atributo de ResumoCategorias
_LINHAS_RESUMO: dict[str, str] = {
    "MENSALIDADE": "mensalidade",
    "SERVIÇO": "servico",
    "SERVICO": "servico",
    "ACORDO": "acordo",
    "TOTAL": "total",
}


def _find_anchor(soup: BeautifulSoup) -> Tag | None:
    for td in soup.find_all("td"):
        if td.get_text().strip().upper() == RESUMO_LABEL:
            return td
    return None


def _row_cells(row: Tag) -> list[Tag]:
    return row.find_all(["td", "th"], recursive=False)


def _read_pairs(cells: list[Tag]) -> list[ItemResumo]:
    """Lê os 5 pares (pago, repasse) nas colunas (2i+1, 2i+2).

    Um par só é lido se a coluna de repasse existe; senão vale o padrão.
    """
    itens: list[ItemResumo] = []
    for i in range(NUM_CATEGORIAS_RESUMO):
        indice_pago = i * 2 + 1
        indice_repasse = i * 2 + 2
        if indice_repasse < len(cells):
            itens.append(
                ItemResumo(
                    pago=cell_text(cells[indice_pago]),
                    repasse=cell_text(cells[indice_repasse]),
                )
            )
        else:
            itens.append(ItemResumo(VALOR_PADRAO_RESUMO, VALOR_PADRAO_RESUMO))
    return itens


def extract_resumo(polo_html: str) -> ResumoCategorias:
    """Monta a grade RESUMO a partir do HTML acumulado de um polo.

    Args:
        polo_html: Concatenação do HTML de todas as linhas vistas enquanto
                   o polo estava aberto.

    Returns:
        ResumoCategorias com 5 itens por linha. encontrado=True só quando
        a âncora e a tabela que a contém foram localizadas.
    """
    resumo = ResumoCategorias()

    soup = BeautifulSoup(f"<table><tbody>{polo_html}</tbody></table>", "lxml")
    anchor = _find_anchor(soup)
    if anchor is None:
        return resumo

    table = anchor.find_parent("table")
    if table is None:
        return resumo

    resumo.encontrado = True
    for row in table.find_all("tr"):
        cells = _row_cells(row)
        if not cells:
            continue
        rotulo = cells[0].get_text().strip().upper()
        atributo = _LINHAS_RESUMO.get(rotulo)
        if atributo is not None:
            setattr(resumo, atributo, _read_pairs(cells))

    return resumo
