"""
Serviço de domínio: Processador de importações.

Orquestra a importação de um arquivo:
1. Recebe o caminho de um relatório.
2. Seleciona o DocumentReader adequado (can_handle) e lê o conteúdo.
3. Identifica o layout (ReportIdentifier).
4. Obtém o parser do layout (registro de parsers).
5. Faz o parse, repassando o log do parser ao ProcessLogger.
6. Concilia os polos com a grade RESUMO (só relatórios NEAD).

A CLI só decide QUAIS arquivos processar e ONDE gravar a saída; a
sequência acima é regra de negócio e fica aqui.
"""

from collections.abc import Sequence
from pathlib import Path

from src.domain.exceptions import ImportacaoBaseError, ParseError, ReportNaoIdentificadoError
from src.domain.models.resultado_importacao import ResultadoImportacao
from src.domain.ports.document_reader import DocumentReader
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.report_identifier import ReportIdentifier
from src.domain.services.reconciliation import conciliar
from src.domain.shared.money import format_money
from src.infrastructure.registry import ReportParserRegistry

REPORT_GLOBS: tuple[str, ...] = ("**/*.html", "**/*.htm")


class ImportProcessor:
    """Processa um arquivo de relatório e produz um ResultadoImportacao.

    Recebe as dependências pelo construtor. Conhece apenas as portas, não
    os leitores, identificadores ou parsers concretos.
    """

    def __init__(
        self,
        readers: Sequence[DocumentReader],
        identifier: ReportIdentifier,
        parser_registry: ReportParserRegistry,
        logger: ProcessLogger,
    ) -> None:
        """
        Args:
            readers: Leitores disponíveis, em ordem de prioridade.
            identifier: Identificador de layout.
            parser_registry: Registro de parsers.
            logger: Registro de processamento.
        """
        self._readers = readers
        self._identifier = identifier
        self._registry = parser_registry
        self._logger = logger

    def process_file(self, file_path: Path) -> ResultadoImportacao | None:
        """Processa um arquivo.

        Returns:
            ResultadoImportacao com pelo menos um registro, ou None se o
            arquivo foi descartado, deu erro ou não produziu registros.
        """
        self._logger.log_file_received(file_path)

        reader = self._find_reader(file_path)
        if reader is None:
            self._logger.log_file_skipped(
                file_path,
                f"Nenhum leitor trata '{file_path.suffix}'",
            )
            return None

        try:
            html = reader.read(file_path)
        except ImportacaoBaseError as e:
            self._logger.log_error(file_path, e)
            return None

        report_kind = self._identifier.identify(html)
        if report_kind is None:
            self._logger.log_report_not_identified(file_path)
            return None

        self._logger.log_report_identified(file_path, report_kind)

        parser = self._registry.get(report_kind)
        if parser is None:
            self._logger.log_error(
                file_path,
                ReportNaoIdentificadoError(
                    str(file_path),
                    f"Relatório '{report_kind}' identificado, mas sem parser. "
                    f"Disponíveis: {self._registry.available_kinds}",
                ),
            )
            return None

        try:
            resultado = parser.parse(
                html,
                file_name=file_path.name,
                log=lambda message: self._logger.log_parser_message(file_path, message),
            )
        except ParseError as e:
            self._logger.log_error(file_path, e)
            return None

        for erro in resultado.erros:
            self._logger.log_extraction_warning(file_path, erro)

        if not resultado.registros:
            self._logger.log_file_skipped(file_path, "Nenhum registro extraído")
            return None

        num_polos = 0
        if resultado.dados is not None:
            num_polos = len(resultado.dados.polos)
            for discrepancia in conciliar(resultado.dados):
                self._logger.log_validation_mismatch(
                    file_path,
                    f"{discrepancia.polo}/{discrepancia.campo}",
                    format_money(discrepancia.esperado),
                    format_money(discrepancia.calculado),
                )

        self._logger.log_parse_complete(file_path, num_polos, len(resultado.registros))
        return resultado

    def process_directory(self, dir_path: Path) -> list[ResultadoImportacao]:
        """Processa todos os relatórios HTML de um diretório (recursivo).

        Raises:
            ValueError: Se o caminho não é um diretório.
        """
        if not dir_path.is_dir():
            raise ValueError(f"Não é um diretório: {dir_path}")

        arquivos = sorted({p for pattern in REPORT_GLOBS for p in dir_path.glob(pattern)})

        if not arquivos:
            print(f"Nenhum arquivo HTML encontrado em {dir_path}")
            return []

        resultados: list[ResultadoImportacao] = []
        for arquivo in arquivos:
            resultado = self.process_file(arquivo)
            if resultado is not None:
                resultados.append(resultado)

        return resultados

    def _find_reader(self, file_path: Path) -> DocumentReader | None:
        for reader in self._readers:
            if reader.can_handle(file_path):
                return reader
        return None
