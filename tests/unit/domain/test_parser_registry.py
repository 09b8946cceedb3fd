"""Testes do registro de parsers."""

import pytest

from src.adapters.input.report_parsers.arquivo_parser import ArquivoReportParser
from src.adapters.input.report_parsers.nead_parser import NeadReportParser
from src.infrastructure.registry import ReportParserRegistry, create_default_registry


class TestReportParserRegistry:
    def test_registro_padrao(self):
        registry = create_default_registry()

        assert len(registry) == 2
        assert registry.available_kinds == ["ARQUIVO", "NEAD"]
        assert isinstance(registry.get("NEAD"), NeadReportParser)
        assert isinstance(registry.get("arquivo"), ArquivoReportParser)

    def test_tipo_inexistente(self):
        assert create_default_registry().get("PDF") is None

    def test_registro_duplicado(self):
        registry = ReportParserRegistry()
        registry.register(NeadReportParser())

        with pytest.raises(ValueError, match="NEAD"):
            registry.register(NeadReportParser())
