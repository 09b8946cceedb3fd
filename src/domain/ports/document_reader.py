"""
Porta de entrada: Leitor de documentos.

Define o contrato para obter o texto de um arquivo de relatório. Cada
tipo de arquivo tem seu adaptador:

    DocumentReader (interface)
    └── HtmlFileReader  → .html/.htm salvos do sistema de origem

O relatório é baixado do navegador e salvo com o charset que o sistema de
origem escolheu (UTF-8 ou Windows-1252). Decodificar corretamente é
responsabilidade do leitor; o parser recebe sempre `str`.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class DocumentReader(ABC):
    """Interface para ler o conteúdo de um arquivo de relatório."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Indica se este leitor sabe tratar o arquivo.

        O ImportProcessor usa o primeiro leitor cujo can_handle devolva True.
        """
        ...

    @abstractmethod
    def read(self, file_path: Path) -> str:
        """Lê o arquivo e devolve o conteúdo decodificado.

        Raises:
            FormatoInvalidoError: Se o arquivo não é do tipo esperado.
            ExtractionError: Se o arquivo não pode ser lido ou decodificado.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nome legível do leitor, para logging. Ex.: 'html-bs4'."""
        ...
