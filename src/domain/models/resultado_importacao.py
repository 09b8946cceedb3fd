"""
Modelo de domínio: Resultado completo do parse de um relatório.

É o objeto que atravessa a arquitetura:
- PRODUZIDO por cada ReportParser (adaptador de entrada).
- CONFERIDO pelo serviço de conciliação.
- CONSUMIDO pelo OutputWriter (adaptador de saída).

`erros` só é não vazio quando nenhum registro foi extraído. Não é uma
exceção: quem chama decide se trata o caso como fatal.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.models.polo_extraido import DadosExtraidos
from src.domain.models.registro_financeiro import RegistroFinanceiro


@dataclass(frozen=True)
class ResultadoImportacao:
    """Saída de uma chamada de parse: registros + avisos de extração."""

    registros: list[RegistroFinanceiro]
    erros: list[str] = field(default_factory=list)

    nome_arquivo: str = ""

    dados: DadosExtraidos | None = None
    """Dados intermediários da extração. Só os parsers NEAD preenchem;
    a conciliação com a grade RESUMO depende deles."""

    @property
    def import_id(self) -> str | None:
        """Identificador do lote, ou None se não há registros."""
        if not self.registros:
            return None
        return self.registros[0].import_id

    @property
    def total_pago(self) -> Decimal:
        return sum((r.valor_pago for r in self.registros), Decimal("0"))

    @property
    def total_repasse(self) -> Decimal:
        return sum((r.valor_repasse for r in self.registros), Decimal("0"))

    @property
    def periodo(self) -> str | None:
        """Período de referência como 'YYYY-MM', ou None se não há registros."""
        if not self.registros:
            return None
        primeiro = self.registros[0]
        return f"{primeiro.referencia_ano:04d}-{primeiro.referencia_mes:02d}"
