"""
Modelo de domínio: Log de importação.

Uma linha por lote importado, cruzando o import_id compartilhado pelos
registros com o arquivo de origem e o período. É o que a tela de histórico
de importações lista e o que permite desfazer uma importação inteira.
"""

from dataclasses import dataclass
from datetime import datetime

from src.domain.models.registro_financeiro import RegistroFinanceiro


@dataclass(frozen=True)
class LogImportacao:
    """Entrada do histórico de importações."""

    import_id: str
    nome_arquivo: str
    total_registros: int
    referencia_mes: int
    referencia_ano: int
    tipo_importacao: str
    data_importacao: datetime

    @classmethod
    def desde_registros(
        cls,
        registros: list[RegistroFinanceiro],
        data_importacao: datetime | None = None,
    ) -> "LogImportacao":
        """Monta o log a partir dos registros de um lote.

        Os dados de arquivo, período e tipo vêm do primeiro registro,
        já que todos compartilham o mesmo lote.

        Raises:
            ValueError: Se a lista estiver vazia (lote vazio não gera log).
        """
        if not registros:
            raise ValueError("Não há registros para gerar o log de importação")

        primeiro = registros[0]
        return cls(
            import_id=primeiro.import_id,
            nome_arquivo=primeiro.nome_arquivo,
            total_registros=len(registros),
            referencia_mes=primeiro.referencia_mes,
            referencia_ano=primeiro.referencia_ano,
            tipo_importacao=primeiro.tipo_importacao,
            data_importacao=data_importacao or datetime.now(),
        )
