"""
Porta de saída: Registro de processamento (Process Logger).

Define os EVENTOS de negócio da importação, não o mecanismo de log:
- "Um arquivo foi recebido"
- "O relatório foi identificado como NEAD"
- "A grade RESUMO não bate com as linhas detalhadas"

As mensagens finas do parser (polo aberto, seção encontrada) chegam pelo
callback `log` do ReportParser e são repassadas a log_parser_message.

Implementações possíveis: console (desenvolvimento), arquivo, memória
(testes).
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ProcessLogger(ABC):
    """Interface para o registro de processamento."""

    # --- Recepção ---

    @abstractmethod
    def log_file_received(self, file_path: Path) -> None:
        """Registra que um arquivo foi recebido para processar."""
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que um arquivo foi descartado.

        Args:
            file_path: Caminho do arquivo descartado.
            reason: Motivo. Ex.: "Nenhum leitor trata '.pdf'".
        """
        ...

    # --- Processamento ---

    @abstractmethod
    def log_report_identified(self, file_path: Path, report_kind: str) -> None:
        """Registra o tipo de relatório identificado."""
        ...

    @abstractmethod
    def log_report_not_identified(self, file_path: Path) -> None:
        """Registra que nenhum layout conhecido reconheceu o arquivo."""
        ...

    @abstractmethod
    def log_parser_message(self, file_path: Path, message: str) -> None:
        """Recebe uma mensagem do callback de log do parser."""
        ...

    @abstractmethod
    def log_parse_complete(self, file_path: Path, num_polos: int, num_registros: int) -> None:
        """Registra o fim de um parse.

        Args:
            file_path: Arquivo processado.
            num_polos: Quantidade de blocos de polo fechados.
            num_registros: Quantidade de registros canônicos gerados.
        """
        ...

    @abstractmethod
    def log_extraction_warning(self, file_path: Path, message: str) -> None:
        """Registra um aviso devolvido em ResultadoImportacao.erros."""
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra um erro que impediu o processamento do arquivo."""
        ...

    # --- Conferência ---

    @abstractmethod
    def log_validation_mismatch(
        self,
        file_path: Path,
        field: str,
        expected: str,
        actual: str,
    ) -> None:
        """Registra uma discrepância entre a grade RESUMO e as linhas detalhadas.

        Args:
            file_path: Arquivo onde a discrepância foi encontrada.
            field: Polo e campo conferido. Ex.: 'Botucatu/resumo_total_pago'.
            expected: Valor informado pelo relatório.
            actual: Valor calculado a partir dos registros.
        """
        ...

    # --- Resumo ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devolve as métricas do processamento.

        Returns:
            {
                'arquivos_recebidos': int,
                'arquivos_processados': int,
                'arquivos_descartados': int,
                'arquivos_com_erro': int,
                'total_registros': int,
                'discrepancias': int,
                'erros': list[dict],  # [{arquivo, erro}]
            }
        """
        ...
