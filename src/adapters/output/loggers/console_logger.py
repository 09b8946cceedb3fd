"""
Adaptador de saída: Logger de console.

Implementação de ProcessLogger que imprime os eventos em stdout com um
formato uniforme e mantém contadores para o resumo final.

As mensagens finas do parser ("[INFO] Novo polo iniciado: ...") são muitas
por arquivo; só aparecem com verbose=True (flag -v da CLI). Avisos do
parser ([AVISO]/[WARNING]) aparecem sempre.
"""

from pathlib import Path

from src.domain.ports.process_logger import ProcessLogger

_PREFIXOS_AVISO: tuple[str, ...] = ("[AVISO]", "[WARNING]")


class ConsoleLogger(ProcessLogger):
    """Logger que imprime os eventos de processamento no console."""

    def __init__(self, verbose: bool = False) -> None:
        self._verbose = verbose
        self._arquivos_recebidos: int = 0
        self._arquivos_processados: int = 0
        self._arquivos_descartados: int = 0
        self._total_registros: int = 0
        self._discrepancias: int = 0
        self._erros: list[dict] = []

    # --- Recepção ---

    def log_file_received(self, file_path: Path) -> None:
        self._arquivos_recebidos += 1
        print(f"  📄 Recebido: {file_path.name}")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._arquivos_descartados += 1
        print(f"  ⏭️  Descartado: {file_path.name}: {reason}")

    # --- Processamento ---

    def log_report_identified(self, file_path: Path, report_kind: str) -> None:
        print(f"  🏫 Relatório identificado: {report_kind} ({file_path.name})")

    def log_report_not_identified(self, file_path: Path) -> None:
        self._arquivos_descartados += 1
        print(f"  ❌ Relatório NÃO identificado: {file_path.name}")

    def log_parser_message(self, file_path: Path, message: str) -> None:
        if self._verbose or message.startswith(_PREFIXOS_AVISO):
            print(f"     {message}")

    def log_parse_complete(self, file_path: Path, num_polos: int, num_registros: int) -> None:
        self._arquivos_processados += 1
        self._total_registros += num_registros
        print(f"  ✅ Concluído: {file_path.name}: {num_polos} polos, {num_registros} registros")

    def log_extraction_warning(self, file_path: Path, message: str) -> None:
        print(f"  ⚠️  Aviso em {file_path.name}: {message}")

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._erros.append({"arquivo": file_path.name, "erro": str(error)})
        print(f"  ❌ Erro: {file_path.name}: {error}")

    # --- Conferência ---

    def log_validation_mismatch(self, file_path: Path, field: str, expected: str, actual: str) -> None:
        self._discrepancias += 1
        print(
            f"  ⚠️  Discrepância em {file_path.name}: "
            f"{field}: informado {expected}, calculado {actual}"
        )

    # --- Resumo ---

    def get_summary(self) -> dict:
        return {
            "arquivos_recebidos": self._arquivos_recebidos,
            "arquivos_processados": self._arquivos_processados,
            "arquivos_descartados": self._arquivos_descartados,
            "arquivos_com_erro": len(self._erros),
            "total_registros": self._total_registros,
            "discrepancias": self._discrepancias,
            "erros": self._erros,
        }

    def print_summary(self) -> None:
        """Imprime o resumo final do processamento."""
        print("\n" + "=" * 60)
        print("RESUMO DO PROCESSAMENTO")
        print("=" * 60)
        print(f"  Arquivos recebidos:   {self._arquivos_recebidos}")
        print(f"  Arquivos processados: {self._arquivos_processados}")
        print(f"  Arquivos descartados: {self._arquivos_descartados}")
        print(f"  Arquivos com erro:    {len(self._erros)}")
        print(f"  Total de registros:   {self._total_registros}")
        print(f"  Discrepâncias:        {self._discrepancias}")

        if self._erros:
            print("\n  ERROS:")
            for err in self._erros:
                print(f"    - {err['arquivo']}: {err['erro']}")

        print("=" * 60)
