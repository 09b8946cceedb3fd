"""Testes do ExcelWriter: abas, colunas e conversão de valores."""

from decimal import Decimal

import pandas as pd
import pytest

from src.adapters.output.writers.excel_writer import (
    COLUNAS_CONCILIACAO,
    COLUNAS_IMPORTACAO,
    COLUNAS_REGISTROS,
    ExcelWriter,
)
from src.domain.exceptions import OutputError
from src.domain.models.polo_extraido import DadosExtraidos, PoloExtraido
from src.domain.models.registro_extraido import RegistroExtraido
from src.domain.models.registro_financeiro import RegistroFinanceiro
from src.domain.models.resultado_importacao import ResultadoImportacao


def _registro(polo: str = "BOTUCATU", import_id: str = "a.html_1", arquivo: str = "a.html") -> RegistroFinanceiro:
    return RegistroFinanceiro(
        polo=polo,
        categoria="Receita Graduação",
        tipo="Mensalidade",
        parcela=3,
        valor_pago=Decimal("1200.50"),
        valor_repasse=Decimal("840.35"),
        referencia_mes=2,
        referencia_ano=2024,
        import_id=import_id,
        nome_arquivo=arquivo,
        tipo_importacao="NEAD",
        sigla_curso="ADM",
    )


def _resultado(arquivo: str = "a.html", com_dados: bool = True) -> ResultadoImportacao:
    dados = None
    if com_dados:
        polo = PoloExtraido(razao_social="EMPRESA X", nome_polo="BOTUCATU", total_bruto="1.200,50")
        polo.receitas_graduacao.append(
            RegistroExtraido(valor_bruto="1.200,50", valor_liquido="840,35")
        )
        dados = DadosExtraidos(polos=[polo])
    return ResultadoImportacao(
        registros=[_registro(import_id=f"{arquivo}_1", arquivo=arquivo)],
        erros=[],
        nome_arquivo=arquivo,
        dados=dados,
    )


class TestExcelWriter:
    @pytest.fixture
    def writer(self):
        return ExcelWriter()

    def test_write_single_cria_tres_abas(self, writer, tmp_path):
        saida = writer.write_single(_resultado(), tmp_path / "registros.xlsx")

        abas = pd.read_excel(saida, sheet_name=None)
        assert list(abas) == ["Registros", "Importacao", "Conciliacao"]
        assert list(abas["Registros"].columns) == COLUNAS_REGISTROS
        assert list(abas["Importacao"].columns) == COLUNAS_IMPORTACAO
        assert list(abas["Conciliacao"].columns) == COLUNAS_CONCILIACAO

    def test_valores_dos_registros(self, writer, tmp_path):
        saida = writer.write_single(_resultado(), tmp_path / "registros.xlsx")

        df = pd.read_excel(saida, sheet_name="Registros")
        linha = df.iloc[0]
        assert linha["Polo"] == "BOTUCATU"
        assert linha["Valor Pago"] == pytest.approx(1200.50)
        assert linha["Valor Repasse"] == pytest.approx(840.35)
        assert linha["Sigla Curso"] == "ADM"
        assert linha["Mês"] == 2

    def test_aba_importacao_uma_linha_por_lote(self, writer, tmp_path):
        saida = writer.write_single(_resultado(), tmp_path / "registros.xlsx")

        df = pd.read_excel(saida, sheet_name="Importacao")
        assert len(df) == 1
        assert df.iloc[0]["Import ID"] == "a.html_1"
        assert df.iloc[0]["Total Registros"] == 1

    def test_aba_conciliacao(self, writer, tmp_path):
        saida = writer.write_single(_resultado(), tmp_path / "registros.xlsx")

        df = pd.read_excel(saida, sheet_name="Conciliacao")
        linha = df.iloc[0]
        assert linha["Polo"] == "BOTUCATU"
        assert linha["Total Bruto Informado"] == pytest.approx(1200.50)
        assert linha["Soma Bruto Detalhe"] == pytest.approx(1200.50)
        assert linha["Soma Líquido Detalhe"] == pytest.approx(840.35)
        assert pd.isna(linha["Resumo Total Pago"])
        assert linha["Discrepâncias"] == 0

    def test_sem_dados_nao_gera_conciliacao(self, writer, tmp_path):
        saida = writer.write_single(_resultado(com_dados=False), tmp_path / "registros.xlsx")
        assert pd.read_excel(saida, sheet_name="Conciliacao").empty

    def test_troca_extensao_e_cria_pasta(self, writer, tmp_path):
        saida = writer.write_single(_resultado(), tmp_path / "sub" / "registros.csv")

        assert saida == tmp_path / "sub" / "registros.xlsx"
        assert saida.exists()

    def test_consolidado(self, writer, tmp_path):
        resultados = [_resultado("a.html"), _resultado("b.html")]
        saida = writer.write_consolidated(resultados, tmp_path / "consolidado.xlsx")

        assert len(pd.read_excel(saida, sheet_name="Registros")) == 2
        importacao = pd.read_excel(saida, sheet_name="Importacao")
        assert list(importacao["Arquivo"]) == ["a.html", "b.html"]

    def test_consolidado_vazio(self, writer, tmp_path):
        with pytest.raises(OutputError):
            writer.write_consolidated([], tmp_path / "consolidado.xlsx")

    def test_falha_de_escrita_vira_output_error(self, writer, tmp_path):
        destino = tmp_path / "ocupado.xlsx"
        destino.mkdir()

        with pytest.raises(OutputError):
            writer.write_single(_resultado(), destino)
