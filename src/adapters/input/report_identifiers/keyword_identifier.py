"""
Adaptador de entrada: Identificador de relatório por marcadores.

Procura termos fixos no HTML bruto para decidir qual layout ele segue.
Os dois layouts conhecidos têm assinaturas inconfundíveis:

- NEAD:    classes CSS "rRelatorio" e "rDetalhes" do gerador de relatórios.
- ARQUIVO: linhas de contexto "Polo:" e "Categoria:" da exportação simples.

A ordem importa: o relatório NEAD pode conter a palavra "Polo:" em texto
livre, então ele é avaliado primeiro.
"""

from src.domain.ports.report_identifier import ReportIdentifier


class KeywordReportIdentifier(ReportIdentifier):
    """Identifica o layout do relatório por marcadores no texto bruto.

    Os marcadores são uma lista de tuplas (tipo, [marcadores]) avaliada de
    cima para baixo; vence o primeiro tipo com algum marcador presente.
    """

    # Marcadores comparados em maiúsculas (html.upper()).
    _REPORT_MARKERS: list[tuple[str, list[str]]] = [
        (
            "NEAD",
            [
                "RRELATORIO",
                "RDETALHES",
            ],
        ),
        (
            "ARQUIVO",
            [
                "POLO:",
                "CATEGORIA:",
            ],
        ),
    ]

    def identify(self, html: str) -> str | None:
        """Identifica o tipo de relatório.

        Args:
            html: Conteúdo bruto do arquivo.

        Returns:
            'NEAD', 'ARQUIVO' ou None.
        """
        html_upper = html.upper()

        for report_kind, markers in self._REPORT_MARKERS:
            for marker in markers:
                if marker in html_upper:
                    return report_kind

        return None

    @property
    def supported_kinds(self) -> list[str]:
        """Tipos de relatório reconhecidos. Útil para logging."""
        return [kind for kind, _ in self._REPORT_MARKERS]
