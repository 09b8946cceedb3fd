"""Testes do ConsoleLogger: filtro de mensagens do parser e contadores."""

from pathlib import Path

from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.domain.exceptions import ExtractionError

ARQUIVO = Path("repasse.html")


class TestConsoleLogger:
    def test_info_do_parser_so_em_verbose(self, capsys):
        ConsoleLogger().log_parser_message(ARQUIVO, "[INFO] Novo polo iniciado: X")
        assert capsys.readouterr().out == ""

        ConsoleLogger(verbose=True).log_parser_message(ARQUIVO, "[INFO] Novo polo iniciado: X")
        assert "Novo polo iniciado" in capsys.readouterr().out

    def test_avisos_do_parser_sempre_aparecem(self, capsys):
        ConsoleLogger().log_parser_message(ARQUIVO, "[AVISO] Seção não reconhecida: X.")
        assert "[AVISO]" in capsys.readouterr().out

    def test_contadores(self):
        logger = ConsoleLogger()
        logger.log_file_received(ARQUIVO)
        logger.log_file_received(Path("b.html"))
        logger.log_file_received(Path("c.html"))
        logger.log_parse_complete(ARQUIVO, 2, 15)
        logger.log_report_not_identified(Path("b.html"))
        logger.log_error(Path("c.html"), ExtractionError("c.html", "falha"))
        logger.log_validation_mismatch(ARQUIVO, "X/resumo_total_pago", "R$ 1,00", "R$ 2,00")

        resumo = logger.get_summary()
        assert resumo["arquivos_recebidos"] == 3
        assert resumo["arquivos_processados"] == 1
        assert resumo["arquivos_descartados"] == 1
        assert resumo["arquivos_com_erro"] == 1
        assert resumo["total_registros"] == 15
        assert resumo["discrepancias"] == 1
        assert resumo["erros"][0]["arquivo"] == "c.html"

    def test_print_summary_lista_erros(self, capsys):
        logger = ConsoleLogger()
        logger.log_error(ARQUIVO, ExtractionError("repasse.html", "falha"))
        capsys.readouterr()

        logger.print_summary()
        saida = capsys.readouterr().out
        assert "RESUMO DO PROCESSAMENTO" in saida
        assert "repasse.html" in saida
