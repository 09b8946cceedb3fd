"""
Ponto de entrada da CLI: nead-import.

Uso:
    # Um relatório
    nead-import /caminho/repasse_fevereiro.html -o /caminho/saida

    # Todos os relatórios .html/.htm de uma pasta (recursivo)
    nead-import /caminho/repasses -o /caminho/saida

    # Mostrar o log detalhado do parser
    nead-import /caminho/repasses -v

Este módulo é o ÚNICO lugar onde os componentes são montados: cria os
adaptadores concretos, injeta no ImportProcessor e grava a saída. Não
contém regra de negócio.
"""

import argparse
import sys
from pathlib import Path

from src.adapters.input.document_readers.html_file_reader import HtmlFileReader
from src.adapters.input.report_identifiers.keyword_identifier import KeywordReportIdentifier
from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.adapters.output.writers.excel_writer import ExcelWriter
from src.domain.exceptions import OutputError
from src.domain.services.import_processor import ImportProcessor
from src.infrastructure.registry import create_default_registry


def main(argv: list[str] | None = None) -> None:
    """Ponto de entrada principal da CLI."""
    args = _parse_args(argv)

    input_path = Path(args.input_path)
    output_dir = Path(args.output_dir) if args.output_dir else None

    # --- Montar componentes ---
    logger = ConsoleLogger(verbose=args.verbose)
    parser_registry = create_default_registry()
    excel_writer = ExcelWriter()

    processor = ImportProcessor(
        readers=[HtmlFileReader()],
        identifier=KeywordReportIdentifier(),
        parser_registry=parser_registry,
        logger=logger,
    )

    if not input_path.exists():
        print(f"❌ O caminho não existe: {input_path}")
        sys.exit(1)

    # --- Diretório de saída ---
    if output_dir is None:
        output_dir = input_path.parent if input_path.is_file() else input_path
    output_dir.mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("IMPORTADOR DE REPASSES NEAD")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Saída:    {output_dir}")
    print(f"  Layouts disponíveis: {', '.join(parser_registry.available_kinds)}")
    print()

    # --- Processar ---
    if input_path.is_file():
        resultado = processor.process_file(input_path)
        resultados = [resultado] if resultado is not None else []
    else:
        resultados = processor.process_directory(input_path)

    if not resultados:
        print("\n❌ Nenhum relatório foi processado.")
        logger.print_summary()
        sys.exit(1)

    for resultado in resultados:
        output_file = output_dir / f"registros_{Path(resultado.nome_arquivo).stem}.xlsx"
        try:
            excel_writer.write_single(resultado, output_file)
        except OutputError as e:
            logger.log_error(output_file, e)
            continue
        print(f"📁 Excel gerado: {output_file}")

    if len(resultados) > 1:
        consolidado_path = output_dir / "consolidado.xlsx"
        try:
            excel_writer.write_consolidated(resultados, consolidado_path)
        except OutputError as e:
            logger.log_error(consolidado_path, e)
        else:
            print(f"\n📁 Consolidado gerado: {consolidado_path}")

    # --- Resumo final ---
    logger.print_summary()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Lê os argumentos da linha de comando."""
    parser = argparse.ArgumentParser(
        description="Importador de relatórios de repasse NEAD (HTML → Excel)",
        epilog="Exemplo: nead-import /caminho/repasses -o /caminho/saida",
    )

    parser.add_argument(
        "input_path",
        help="Caminho de um relatório .html/.htm ou de um diretório com relatórios",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Diretório de saída das planilhas. "
        "Se omitido, usa o diretório do relatório.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Mostra todas as mensagens do parser (polos, seções, totais).",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
