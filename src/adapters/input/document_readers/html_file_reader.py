"""
Adaptador de entrada: Leitor de arquivos HTML.

Os relatórios são salvos pelo navegador com o charset escolhido pelo
sistema de origem: UTF-8 nos mais novos, Windows-1252 nos antigos, às
vezes sem declarar nenhum. bs4.UnicodeDammit testa a declaração <meta>,
o BOM e, por fim, heurísticas de detecção, e devolve o texto decodificado.

Este adaptador:
1. Valida existência e extensão (.html/.htm).
2. Lê os bytes do arquivo.
3. Decodifica com UnicodeDammit.
"""

from pathlib import Path

from bs4 import UnicodeDammit

from src.domain.exceptions import ExtractionError, FormatoInvalidoError
from src.domain.ports.document_reader import DocumentReader

HTML_SUFFIXES: tuple[str, ...] = (".html", ".htm")


class HtmlFileReader(DocumentReader):
    """Lê relatórios .html/.htm e devolve o conteúdo como str."""

    def __init__(self, fallback_encodings: tuple[str, ...] = ("utf-8", "windows-1252")) -> None:
        """
        Args:
            fallback_encodings: Charsets tentados antes da detecção
                                automática quando o arquivo não declara um.
        """
        self._fallback_encodings = list(fallback_encodings)

    @property
    def name(self) -> str:
        return "html-bs4"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in HTML_SUFFIXES

    def read(self, file_path: Path) -> str:
        """Lê e decodifica o arquivo.

        Raises:
            FormatoInvalidoError: Se o arquivo não existe ou não é HTML.
            ExtractionError: Se não for possível ler ou decodificar.
        """
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "HTML", "O arquivo não existe")

        if not self.can_handle(file_path):
            raise FormatoInvalidoError(
                str(file_path),
                "HTML",
                f"Extensão '{file_path.suffix}' não suportada",
            )

        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise ExtractionError(str(file_path), f"Erro ao ler o arquivo: {e}") from e

        dammit = UnicodeDammit(data, self._fallback_encodings, is_html=True)
        if dammit.unicode_markup is None:
            raise ExtractionError(str(file_path), "Não foi possível detectar o charset do arquivo")

        return dammit.unicode_markup
