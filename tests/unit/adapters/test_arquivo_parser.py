"""
Testes do parser da exportação simples ("Arquivo").

Formato:
    | Polo: X |
    | Categoria: Y |
    | tipo | parcela | pago | ... | repasse | referência |
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from src.adapters.input.report_parsers import arquivo_parser
from src.adapters.input.report_parsers.arquivo_parser import ArquivoReportParser
from src.domain.exceptions import ParseError
from src.domain.services.record_transformer import MENSAGEM_SEM_REGISTROS

AGORA = datetime(2024, 3, 1, 12, 0, 0)
HOJE = date(2025, 7, 15)


def _marcador(texto: str) -> str:
    return f"<tr><td>{texto}</td></tr>"


def _lancamento(
    tipo: str = "Mensalidade",
    parcela: str = "2",
    pago: str = "1.000,00",
    repasse: str = "700,00",
    referencia: str = "JANEIRO/2024",
) -> str:
    cells = [tipo, parcela, pago, "x", repasse, referencia]
    return "<tr>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr>"


def _documento(*linhas: str) -> str:
    return f"<html><body><table>{''.join(linhas)}</table></body></html>"


class TestArquivoReportParser:
    @pytest.fixture
    def parser(self):
        return ArquivoReportParser(agora=AGORA, today=HOJE)

    def test_report_kind(self, parser):
        assert parser.report_kind == "ARQUIVO"

    def test_lancamento_basico(self, parser):
        html = _documento(
            _marcador("Polo: Botucatu"),
            _marcador("Categoria: Receita Graduação"),
            _lancamento(),
        )
        resultado = parser.parse(html, file_name="export.html")

        assert len(resultado.registros) == 1
        reg = resultado.registros[0]
        assert reg.polo == "Botucatu"
        assert reg.categoria == "Receita Graduação"
        assert reg.tipo == "Mensalidade"
        assert reg.parcela == 2
        assert reg.valor_pago == Decimal("1000.00")
        assert reg.valor_repasse == Decimal("700.00")
        assert (reg.referencia_mes, reg.referencia_ano) == (1, 2024)
        assert reg.tipo_importacao == "Arquivo"
        assert reg.import_id.startswith("export.html_")
        assert resultado.erros == []

    def test_contexto_muda_entre_blocos(self, parser):
        html = _documento(
            _marcador("Polo: A"),
            _marcador("Categoria: C1"),
            _lancamento(),
            _marcador("Polo: B"),
            _lancamento(),
            _marcador("Categoria: C2"),
            _lancamento(),
        )
        resultado = parser.parse(html)
        assert [(r.polo, r.categoria) for r in resultado.registros] == [
            ("A", "C1"),
            ("B", "C1"),
            ("B", "C2"),
        ]

    def test_periodo_por_linha(self, parser):
        html = _documento(
            _marcador("Polo: A"),
            _lancamento(referencia="MARÇO/2023"),
            _lancamento(referencia=""),
        )
        resultado = parser.parse(html)
        periodos = [(r.referencia_mes, r.referencia_ano) for r in resultado.registros]
        assert periodos == [(3, 2023), (7, 2025)]

    def test_linhas_com_poucas_colunas_sao_ignoradas(self, parser):
        html = _documento(
            _marcador("Polo: A"),
            "<tr><td>a</td><td>b</td><td>c</td><td>d</td><td>e</td></tr>",
            _lancamento(),
        )
        assert len(parser.parse(html).registros) == 1

    def test_sem_polo_vira_desconhecido(self, parser):
        resultado = parser.parse(_documento(_lancamento()))
        assert resultado.registros[0].polo == "Desconhecido"

    def test_tipo_desconhecido_vira_mensalidade_com_aviso(self, parser):
        mensagens: list[str] = []
        resultado = parser.parse(_documento(_lancamento(tipo="Bolsa")), log=mensagens.append)

        assert resultado.registros[0].tipo == "Mensalidade"
        assert any(m.startswith("[AVISO]") and "Bolsa" in m for m in mensagens)

    def test_sem_lancamentos(self, parser):
        mensagens: list[str] = []
        resultado = parser.parse(_documento(_marcador("Polo: A")), log=mensagens.append)

        assert resultado.registros == []
        assert resultado.erros == [MENSAGEM_SEM_REGISTROS]
        assert f"[AVISO] {MENSAGEM_SEM_REGISTROS}" in mensagens

    def test_nao_guarda_dados_intermediarios(self, parser):
        resultado = parser.parse(_documento(_marcador("Polo: A"), _lancamento()))
        assert resultado.dados is None

    def test_valor_com_expoente_absurdo_vale_zero(self, parser):
        resultado = parser.parse(_documento(_lancamento(pago="1e1000000", repasse="-9E+999999")))
        reg = resultado.registros[0]
        assert reg.valor_pago == Decimal("0")
        assert reg.valor_repasse == Decimal("0")

    def test_erro_interno_vira_parse_error(self, parser, monkeypatch):
        def quebrar(*args, **kwargs):
            raise RuntimeError("relógio indisponível")

        monkeypatch.setattr(arquivo_parser, "gerar_import_id", quebrar)

        with pytest.raises(ParseError, match="relógio indisponível"):
            parser.parse(_documento(_lancamento()), file_name="export.html")
