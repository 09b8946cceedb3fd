"""
Registro dos parsers de relatório disponíveis.

Centraliza a relação tipo_relatorio → instância do parser. Suportar um
novo layout exige dois passos:
1. Criar a classe XxxReportParser implementando ReportParser.
2. Registrá-la em create_default_registry().

O ImportProcessor só pede "o parser para NEAD"; não sabe quais layouts
existem.
"""

from src.domain.ports.report_parser import ReportParser


class ReportParserRegistry:
    """Registro dos parsers de relatório disponíveis."""

    def __init__(self) -> None:
        self._parsers: dict[str, ReportParser] = {}

    def register(self, parser: ReportParser) -> None:
        """Registra um parser. A chave é parser.report_kind (maiúsculas).

        Raises:
            ValueError: Se já existe um parser para esse tipo.
        """
        kind = parser.report_kind.upper()
        if kind in self._parsers:
            raise ValueError(
                f"Já existe um parser registrado para '{kind}': "
                f"{type(self._parsers[kind]).__name__}. "
                f"Não é possível registrar {type(parser).__name__}."
            )
        self._parsers[kind] = parser

    def get(self, report_kind: str) -> ReportParser | None:
        """Devolve o parser do tipo (sem diferenciar maiúsculas), ou None."""
        return self._parsers.get(report_kind.upper())

    @property
    def available_kinds(self) -> list[str]:
        """Tipos de relatório com parser disponível."""
        return sorted(self._parsers.keys())

    def __len__(self) -> int:
        return len(self._parsers)


def create_default_registry() -> ReportParserRegistry:
    """Cria o registro com todos os parsers disponíveis."""
    registry = ReportParserRegistry()

    from src.adapters.input.report_parsers.nead_parser import NeadReportParser

    registry.register(NeadReportParser())

    from src.adapters.input.report_parsers.arquivo_parser import ArquivoReportParser

    registry.register(ArquivoReportParser())

    return registry
