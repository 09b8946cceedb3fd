"""Testes da conciliação entre a grade RESUMO e as linhas detalhadas."""

from decimal import Decimal

from src.domain.models.polo_extraido import DadosExtraidos, PoloExtraido
from src.domain.models.registro_extraido import DescontoExtraido, RegistroExtraido
from src.domain.models.resumo_categorias import ItemResumo, ResumoCategorias
from src.domain.services.reconciliation import (
    CAMPO_RESUMO_PAGO,
    CAMPO_RESUMO_REPASSE,
    conciliar,
    conciliar_polo,
    linha_conciliacao,
    totais_detalhados,
)


def _resumo_total(pagos: list[str], repasses: list[str]) -> ResumoCategorias:
    itens = [ItemResumo(p, r) for p, r in zip(pagos, repasses)]
    itens += [ItemResumo() for _ in range(5 - len(itens))]
    return ResumoCategorias(total=itens, encontrado=True)


def _polo(resumo: ResumoCategorias | None = None) -> PoloExtraido:
    return PoloExtraido(
        nome_polo="Botucatu",
        receitas_graduacao=[
            RegistroExtraido(valor_bruto="1.000,00", valor_liquido="700,00"),
            RegistroExtraido(valor_bruto="200,00", valor_liquido="140,00"),
        ],
        receitas_tecnico=[RegistroExtraido(valor_bruto="300,00", valor_liquido="210,00")],
        descontos=[DescontoExtraido(valor_bruto="50,00", valor_liquido="50,00")],
        resumo=resumo,
    )


class TestConciliarPolo:
    def test_totais_detalhados_ignoram_descontos(self):
        assert totais_detalhados(_polo()) == (Decimal("1500.00"), Decimal("1050.00"))

    def test_grade_que_bate(self):
        resumo = _resumo_total(["1.200,00", "0,00", "300,00"], ["840,00", "0,00", "210,00"])
        assert conciliar_polo(_polo(resumo)) == []

    def test_diferenca_de_um_centavo_e_tolerada(self):
        resumo = _resumo_total(["1.500,01"], ["1.049,99"])
        assert conciliar_polo(_polo(resumo)) == []

    def test_grade_divergente(self):
        resumo = _resumo_total(["1.600,00"], ["1.050,00"])
        discrepancias = conciliar_polo(_polo(resumo))

        assert len(discrepancias) == 1
        d = discrepancias[0]
        assert d.polo == "Botucatu"
        assert d.campo == CAMPO_RESUMO_PAGO
        assert d.esperado == Decimal("1600.00")
        assert d.calculado == Decimal("1500.00")

    def test_as_duas_conferencias(self):
        resumo = _resumo_total(["1,00"], ["1,00"])
        campos = [d.campo for d in conciliar_polo(_polo(resumo))]
        assert campos == [CAMPO_RESUMO_PAGO, CAMPO_RESUMO_REPASSE]

    def test_sem_resumo_nao_concilia(self):
        assert conciliar_polo(_polo(None)) == []

    def test_grade_nao_encontrada_nao_concilia(self):
        assert conciliar_polo(_polo(ResumoCategorias())) == []


class TestConciliar:
    def test_varios_polos(self):
        ok = _polo(_resumo_total(["1.500,00"], ["1.050,00"]))
        ruim = _polo(_resumo_total(["1,00"], ["1.050,00"]))
        assert len(conciliar(DadosExtraidos(polos=[ok, ruim]))) == 1


class TestLinhaConciliacao:
    def test_campos(self):
        polo = _polo(_resumo_total(["1.500,00"], ["1.050,00"]))
        polo.total_bruto = "1.500,00"
        linha = linha_conciliacao(polo)

        assert linha["polo"] == "Botucatu"
        assert linha["total_bruto_informado"] == Decimal("1500.00")
        assert linha["total_liquido_informado"] is None
        assert linha["soma_bruto_detalhe"] == Decimal("1500.00")
        assert linha["resumo_total_repasse"] == Decimal("1050.00")
        assert linha["soma_descontos_detalhe"] == Decimal("50.00")
        assert linha["discrepancias"] == 0

    def test_sem_grade(self):
        linha = linha_conciliacao(_polo())
        assert linha["resumo_total_pago"] is None
        assert linha["resumo_total_repasse"] is None
