"""
Portas (interfaces) do domínio.

As portas definem O QUE o domínio precisa, sem dizer COMO é implementado.
Cada porta tem um ou mais adaptadores.

Uso:
    from src.domain.ports import DocumentReader, ReportParser, OutputWriter
"""

from src.domain.ports.document_reader import DocumentReader
from src.domain.ports.output_writer import OutputWriter
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.report_identifier import ReportIdentifier
from src.domain.ports.report_parser import LogSink, ReportParser

__all__ = [
    "DocumentReader",
    "LogSink",
    "OutputWriter",
    "ProcessLogger",
    "ReportIdentifier",
    "ReportParser",
]
