"""
Testes dos predicados visuais do relatório NEAD.

Cada heurística é testada isoladamente sobre uma linha <tr> mínima.
"""

import pytest
from bs4 import BeautifulSoup

from src.adapters.input.report_parsers.nead_markers import (
    CATEGORIA_DESCONTO,
    CATEGORIA_RECEITA_GRADUACAO,
    CATEGORIA_RECEITA_POS_GRADUACAO,
    CATEGORIA_RECEITA_PROFISSIONALIZANTE,
    CATEGORIA_RECEITA_TECNICO,
    CATEGORIA_RECEITA_UNIVERSO_EAD,
    TOTAL_BRUTO,
    TOTAL_DESCONTOS,
    TOTAL_LIQUIDO,
    cell_text,
    classify_category,
    classify_total_label,
    direct_rows,
    find_section_title,
    find_total_label,
    is_bold,
    is_polo_header,
    style_declarations,
    total_value_cell,
)


def _row(html: str):
    """Primeira <tr> de uma tabela montada com o HTML dado."""
    soup = BeautifulSoup(f"<table>{html}</table>", "lxml")
    return soup.find("tr")


class TestIsPoloHeader:
    def test_fundo_cinza(self):
        assert is_polo_header(_row('<tr><td style="background:#BFBFBF">X</td></tr>'))

    def test_fundo_cinza_com_espacos_e_minusculas(self):
        assert is_polo_header(_row('<tr><td style="BACKGROUND: #bfbfbf; color:black">X</td></tr>'))

    def test_so_a_primeira_celula_conta(self):
        html = '<tr><td>X</td><td style="background:#BFBFBF">Y</td></tr>'
        assert not is_polo_header(_row(html))

    def test_sem_estilo(self):
        assert not is_polo_header(_row("<tr><td>X</td></tr>"))

    def test_sem_td(self):
        assert not is_polo_header(_row("<tr><th>X</th></tr>"))


class TestFindSectionTitle:
    def test_titulo_com_font_weight(self):
        row = _row('<tr><td colspan="4" style="font-size:20px;font-weight:bold">RECEITA GRADUAÇÃO</td></tr>')
        assert cell_text(find_section_title(row)) == "RECEITA GRADUAÇÃO"

    def test_titulo_com_tag_b(self):
        row = _row('<tr><td colspan="4" style="font-size:20px"><b>DESCONTOS</b></td></tr>')
        assert find_section_title(row) is not None

    def test_sem_negrito_nao_e_titulo(self):
        row = _row('<tr><td colspan="4" style="font-size:20px">RECEITA GRADUAÇÃO</td></tr>')
        assert find_section_title(row) is None

    def test_fonte_diferente_nao_e_titulo(self):
        row = _row('<tr><td colspan="4" style="font-size:12px;font-weight:bold">X</td></tr>')
        assert find_section_title(row) is None

    def test_colspan_diferente_nao_e_titulo(self):
        row = _row('<tr><td colspan="2" style="font-size:20px;font-weight:bold">X</td></tr>')
        assert find_section_title(row) is None

    def test_resumo_nao_e_titulo_de_secao(self):
        row = _row('<tr><td colspan="4" style="font-size:20px;font-weight:bold"> Resumo </td></tr>')
        assert find_section_title(row) is None


class TestIsBold:
    def test_font_weight_bold(self):
        td = _row('<tr><td style="font-weight: BOLD">X</td></tr>').td
        assert is_bold(td)

    def test_font_weight_normal(self):
        td = _row('<tr><td style="font-weight:normal">X</td></tr>').td
        assert not is_bold(td)

    def test_style_declarations(self):
        td = _row('<tr><td style="font-size: 20px; FONT-WEIGHT:bold;">X</td></tr>').td
        assert style_declarations(td) == {"font-size": "20px", "font-weight": "bold"}


class TestClassifyCategory:
    @pytest.mark.parametrize(
        "titulo, categoria",
        [
            ("DESCONTOS", CATEGORIA_DESCONTO),
            ("RECEITA GRADUAÇÃO", CATEGORIA_RECEITA_GRADUACAO),
            ("RECEITA GRADUACAO", CATEGORIA_RECEITA_GRADUACAO),
            ("RECEITA PÓS-GRADUAÇÃO", CATEGORIA_RECEITA_POS_GRADUACAO),
            ("receita pós-graduação", CATEGORIA_RECEITA_POS_GRADUACAO),
            ("RECEITA TÉCNICO", CATEGORIA_RECEITA_TECNICO),
            ("RECEITA PROFISSIONALIZANTE", CATEGORIA_RECEITA_PROFISSIONALIZANTE),
            ("RECEITA PROFISSIONALIZANTES", CATEGORIA_RECEITA_PROFISSIONALIZANTE),
            ("RECEITA UNIVERSO EAD", CATEGORIA_RECEITA_UNIVERSO_EAD),
        ],
    )
    def test_categorias(self, titulo, categoria):
        assert classify_category(titulo) == categoria

    def test_desconhecida(self):
        assert classify_category("RECEITA OUTROS") is None


class TestTotais:
    def test_find_total_label_e_valor(self):
        row = _row("<tr><td><b>TOTAL NF</b></td><td>1.234,56</td></tr>")
        label = find_total_label(row)
        assert cell_text(label) == "TOTAL NF"
        assert cell_text(total_value_cell(label)) == "1.234,56"

    def test_negrito_sem_total_ou_valor(self):
        row = _row("<tr><td><b>OBSERVAÇÃO</b></td><td>x</td></tr>")
        assert find_total_label(row) is None

    def test_primeiro_rotulo_com_valor(self):
        row = _row("<tr><td><b>POLO</b></td><td><b>VALOR REPASSE</b></td><td>10,00</td></tr>")
        label = find_total_label(row)
        assert cell_text(total_value_cell(label)) == "10,00"

    def test_rotulo_sem_celula_seguinte(self):
        row = _row("<tr><td><b>TOTAL NF</b></td></tr>")
        assert total_value_cell(find_total_label(row)) is None

    @pytest.mark.parametrize(
        "rotulo, campo",
        [
            ("TOTAL NF", TOTAL_BRUTO),
            ("VALOR NF", TOTAL_BRUTO),
            ("TOTAL DESCONTOS", TOTAL_DESCONTOS),
            ("VALOR DESCONTO", TOTAL_DESCONTOS),
            ("TOTAL VALOR LÍQUIDO", TOTAL_LIQUIDO),
            ("VALOR REPASSE", TOTAL_LIQUIDO),
        ],
    )
    def test_classify_total_label(self, rotulo, campo):
        assert classify_total_label(rotulo) == campo

    def test_rotulo_total_generico(self):
        assert classify_total_label("TOTAL") is None


class TestDirectRows:
    def test_nao_desce_em_tabelas_aninhadas(self):
        soup = BeautifulSoup(
            "<table id='t'><tr><td><table><tr><td>dentro</td></tr></table></td></tr>"
            "<tr><td>fora</td></tr></table>",
            "lxml",
        )
        rows = direct_rows(soup.find("table", id="t"))
        assert len(rows) == 2

    def test_linhas_dentro_de_tbody(self):
        soup = BeautifulSoup("<table><tbody><tr><td>a</td></tr><tr><td>b</td></tr></tbody></table>", "lxml")
        assert [cell_text(r) for r in direct_rows(soup.table)] == ["a", "b"]


class TestCellText:
    def test_none(self):
        assert cell_text(None) == ""

    def test_normaliza_espacos(self):
        td = _row("<tr><td>  RECEITA\n   GRADUAÇÃO </td></tr>").td
        assert cell_text(td) == "RECEITA GRADUAÇÃO"
