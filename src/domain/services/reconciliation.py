"""
Serviço de domínio: Conciliação com a grade RESUMO.

Cada polo do relatório NEAD traz uma grade RESUMO com os totais que o
sistema de origem calculou. Ela é consultiva: os registros importados vêm
sempre das linhas detalhadas. A conciliação apenas aponta quando as duas
fontes divergem, para que alguém confira o relatório antes de fechar o mês.

Conferências por polo (apenas quando a grade foi encontrada):
    Σ pago da linha TOTAL     vs  Σ valor_bruto das cinco coleções de receita
    Σ repasse da linha TOTAL  vs  Σ valor_liquido das cinco coleções de receita

Diferenças até R$ 0,01 são arredondamento e não contam.
"""

from decimal import Decimal

from src.domain.models.discrepancia import Discrepancia
from src.domain.models.polo_extraido import DadosExtraidos, PoloExtraido
from src.domain.shared.money import parse_currency

TOLERANCIA = Decimal("0.01")

CAMPO_RESUMO_PAGO = "resumo_total_pago"
CAMPO_RESUMO_REPASSE = "resumo_total_repasse"


def _soma(valores: list[str]) -> Decimal:
    return sum((abs(parse_currency(v)) for v in valores), Decimal("0"))


def totais_detalhados(polo: PoloExtraido) -> tuple[Decimal, Decimal]:
    """(Σ valor_bruto, Σ valor_liquido) das receitas detalhadas do polo."""
    receitas = polo.todas_receitas
    return (
        _soma([r.valor_bruto for r in receitas]),
        _soma([r.valor_liquido for r in receitas]),
    )


def totais_resumo(polo: PoloExtraido) -> tuple[Decimal, Decimal] | None:
    """(Σ pago, Σ repasse) da linha TOTAL da grade, ou None sem grade."""
    if polo.resumo is None or not polo.resumo.encontrado:
        return None
    linha_total = polo.resumo.total
    return (
        sum((parse_currency(item.pago) for item in linha_total), Decimal("0")),
        sum((parse_currency(item.repasse) for item in linha_total), Decimal("0")),
    )


def conciliar_polo(polo: PoloExtraido) -> list[Discrepancia]:
    """Confere um polo contra sua grade RESUMO.

    Returns:
        Lista de discrepâncias (vazia se bate ou se não há grade).
    """
    resumo = totais_resumo(polo)
    if resumo is None:
        return []

    esperado_pago, esperado_repasse = resumo
    calculado_pago, calculado_repasse = totais_detalhados(polo)

    discrepancias: list[Discrepancia] = []
    for campo, esperado, calculado in (
        (CAMPO_RESUMO_PAGO, esperado_pago, calculado_pago),
        (CAMPO_RESUMO_REPASSE, esperado_repasse, calculado_repasse),
    ):
        if abs(calculado - esperado) > TOLERANCIA:
            discrepancias.append(
                Discrepancia(
                    polo=polo.nome_polo,
                    campo=campo,
                    esperado=esperado,
                    calculado=calculado,
                )
            )
    return discrepancias


def conciliar(dados: DadosExtraidos) -> list[Discrepancia]:
    """Confere todos os polos do relatório, na ordem do documento."""
    discrepancias: list[Discrepancia] = []
    for polo in dados.polos:
        discrepancias.extend(conciliar_polo(polo))
    return discrepancias


def linha_conciliacao(polo: PoloExtraido) -> dict:
    """Resumo de um polo para a aba de conciliação da planilha.

    Os totais informados (total_bruto, total_descontos, total_liquido) vêm
    das linhas de rodapé do bloco; None quando o relatório não os traz.
    """
    soma_bruto, soma_liquido = totais_detalhados(polo)
    resumo = totais_resumo(polo)

    def informado(texto: str | None) -> Decimal | None:
        return parse_currency(texto) if texto is not None else None

    return {
        "polo": polo.nome_polo,
        "razao_social": polo.razao_social,
        "total_bruto_informado": informado(polo.total_bruto),
        "soma_bruto_detalhe": soma_bruto,
        "resumo_total_pago": resumo[0] if resumo else None,
        "total_liquido_informado": informado(polo.total_liquido),
        "soma_liquido_detalhe": soma_liquido,
        "resumo_total_repasse": resumo[1] if resumo else None,
        "total_descontos_informado": informado(polo.total_descontos),
        "soma_descontos_detalhe": _soma([d.valor_bruto for d in polo.descontos]),
        "discrepancias": len(conciliar_polo(polo)),
    }
