"""
Porta de entrada: Parser de relatórios de repasse.

Define o contrato que cada parser de layout deve cumprir. Há exatamente
um ReportParser por layout suportado:

    ReportParser (interface)
    ├── NeadReportParser     → relatório de repasse NEAD (rRelatorio)
    └── ArquivoReportParser  → exportação simples com linhas "Polo:"/"Categoria:"

Contrato de erro:
O parser NUNCA lança exceção por conteúdo malformado. Seções ausentes e
linhas curtas viram avisos no `log`; zero registros vira uma mensagem em
ResultadoImportacao.erros. Qualquer outra falha sai como ParseError, que o
ImportProcessor registra antes de seguir para o próximo arquivo.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from src.domain.models.resultado_importacao import ResultadoImportacao

LogSink = Callable[[str], None]
"""Callback síncrono que recebe cada evento notável do parse, na ordem do
documento. Não deve lançar exceção; uma falha dele vira ParseError."""


def descartar_log(message: str) -> None:
    """Log padrão: ignora a mensagem."""
    return None


class ReportParser(ABC):
    """Interface para converter o HTML de um relatório em registros."""

    @property
    @abstractmethod
    def report_kind(self) -> str:
        """Tipo de relatório que este parser trata.

        É a chave no registro de parsers e deve coincidir com o que
        ReportIdentifier.identify() devolve: 'NEAD', 'ARQUIVO'.
        """
        ...

    @abstractmethod
    def parse(
        self,
        html: str,
        file_name: str = "",
        log: LogSink = descartar_log,
    ) -> ResultadoImportacao:
        """Converte o HTML em ResultadoImportacao.

        Args:
            html: Conteúdo do relatório como texto.
            file_name: Nome do arquivo de origem. Compõe o import_id e é
                       gravado em todos os registros.
            log: Callback para os eventos do parse.

        Returns:
            ResultadoImportacao com registros e, se nada foi extraído,
            um aviso em `erros`.

        Raises:
            ParseError: Falha inesperada, não relacionada ao conteúdo.
        """
        ...
