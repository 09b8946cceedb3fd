"""
Modelo de extração: grade de conferência "RESUMO" de um polo.

Cada bloco de polo do relatório traz uma tabela RESUMO com quatro linhas
(MENSALIDADE, SERVIÇO, ACORDO, TOTAL) e cinco categorias de receita, cada
uma com duas colunas (pago, repasse). A grade é apenas consultiva: serve
para conferir os totais calculados a partir das linhas detalhadas.

Invariante: toda linha tem SEMPRE 5 itens, mesmo que a tabela de origem
tenha menos colunas. Itens ausentes valem ("0.00", "0.00").
"""

from dataclasses import dataclass, field

NUM_CATEGORIAS_RESUMO = 5
VALOR_PADRAO_RESUMO = "0.00"


@dataclass(frozen=True)
class ItemResumo:
    """Par (pago, repasse) de uma categoria na grade, como texto bruto."""

    pago: str = VALOR_PADRAO_RESUMO
    repasse: str = VALOR_PADRAO_RESUMO


def _linha_padrao() -> list[ItemResumo]:
    return [ItemResumo() for _ in range(NUM_CATEGORIAS_RESUMO)]


@dataclass
class ResumoCategorias:
    """Grade 4 × 5 do RESUMO de um polo."""

    mensalidade: list[ItemResumo] = field(default_factory=_linha_padrao)
    servico: list[ItemResumo] = field(default_factory=_linha_padrao)
    acordo: list[ItemResumo] = field(default_factory=_linha_padrao)
    total: list[ItemResumo] = field(default_factory=_linha_padrao)

    encontrado: bool = False
    """True se a âncora RESUMO foi localizada no HTML do polo. Quando False,
    a grade é toda zerada e não deve ser usada na conciliação."""

    @property
    def detalhes(self) -> dict[str, list[ItemResumo]]:
        """As quatro linhas indexadas pelo nome."""
        return {
            "mensalidade": self.mensalidade,
            "servico": self.servico,
            "acordo": self.acordo,
            "total": self.total,
        }
