"""
Porta de entrada: Identificador do tipo de relatório.

Define o contrato para decidir qual layout um HTML segue, olhando apenas
para o texto bruto. A implementação atual procura marcadores (classes
CSS e rótulos fixos), mas a interface admite estratégias mais elaboradas.
"""

from abc import ABC, abstractmethod


class ReportIdentifier(ABC):
    """Interface para identificar o layout de um relatório."""

    @abstractmethod
    def identify(self, html: str) -> str | None:
        """Identifica o tipo de relatório.

        Args:
            html: Conteúdo bruto do arquivo.

        Returns:
            Tipo normalizado em maiúsculas ('NEAD', 'ARQUIVO') ou None se
            nenhum layout conhecido for reconhecido.
        """
        ...
