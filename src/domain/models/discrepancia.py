"""
Modelo de domínio: Discrepância encontrada na conciliação.

Registra que um total informado pelo relatório (grade RESUMO) não bate
com o total calculado a partir das linhas detalhadas do mesmo polo.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Discrepancia:
    """Diferença entre um total esperado e um calculado."""

    polo: str
    campo: str
    """Ex.: 'resumo_total_pago', 'resumo_total_repasse'."""

    esperado: Decimal
    calculado: Decimal

    @property
    def diferenca(self) -> Decimal:
        return self.calculado - self.esperado
