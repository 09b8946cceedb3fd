"""
Porta de saída: Escritor de resultados.

Define o contrato para persistir os resultados de importação em algum
formato (Excel hoje). O domínio só produz ResultadoImportacao e o entrega
a quem implementar esta porta.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.resultado_importacao import ResultadoImportacao


class OutputWriter(ABC):
    """Interface para escrever resultados de importação."""

    @abstractmethod
    def write_single(self, resultado: ResultadoImportacao, output_path: Path) -> Path:
        """Escreve o resultado de um único relatório.

        Args:
            resultado: Resultado do parse de um relatório.
            output_path: Caminho do arquivo a criar.

        Returns:
            Caminho real do arquivo criado (a extensão pode ser ajustada).

        Raises:
            OutputError: Se a escrita falhar.
        """
        ...

    @abstractmethod
    def write_consolidated(self, resultados: list[ResultadoImportacao], output_path: Path) -> Path:
        """Escreve a consolidação de vários relatórios num único arquivo.

        Raises:
            OutputError: Se a lista estiver vazia ou a escrita falhar.
        """
        ...
