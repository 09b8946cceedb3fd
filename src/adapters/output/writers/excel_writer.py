"""
Adaptador de saída: Escritor de Excel.

Gera planilhas com o layout padrão de 3 abas:
- Registros:   um RegistroFinanceiro por linha, pronto para carga.
- Importacao:  uma linha por lote (LogImportacao), como no histórico.
- Conciliacao: por polo, totais informados × somas do detalhe × grade RESUMO.

Valores Decimal só viram float aqui, na fronteira com o Excel.
"""

from pathlib import Path

import pandas as pd

from src.domain.exceptions import OutputError
from src.domain.models.log_importacao import LogImportacao
from src.domain.models.resultado_importacao import ResultadoImportacao
from src.domain.ports.output_writer import OutputWriter
from src.domain.services.reconciliation import linha_conciliacao

COLUNAS_REGISTROS = [
    "Polo",
    "Categoria",
    "Tipo",
    "Parcela",
    "Valor Pago",
    "Valor Repasse",
    "Mês",
    "Ano",
    "Sigla Curso",
    "Import ID",
    "Arquivo",
    "Tipo Importação",
]

COLUNAS_IMPORTACAO = [
    "Import ID",
    "Arquivo",
    "Total Registros",
    "Mês",
    "Ano",
    "Tipo Importação",
    "Data Importação",
]

COLUNAS_CONCILIACAO = [
    "Arquivo",
    "Polo",
    "Razão Social",
    "Total Bruto Informado",
    "Soma Bruto Detalhe",
    "Resumo Total Pago",
    "Total Líquido Informado",
    "Soma Líquido Detalhe",
    "Resumo Total Repasse",
    "Total Descontos Informado",
    "Soma Descontos Detalhe",
    "Discrepâncias",
]


def _float_ou_none(valor) -> float | None:
    return float(valor) if valor is not None else None


class ExcelWriter(OutputWriter):
    """Gera planilhas Excel com formato padronizado."""

    def write_single(self, resultado: ResultadoImportacao, output_path: Path) -> Path:
        """Escreve o resultado de um relatório.

        Args:
            resultado: Resultado do parse.
            output_path: Caminho do arquivo. Sem .xlsx, a extensão é trocada.

        Returns:
            Caminho do arquivo criado.
        """
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escrever_excel([resultado], output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    def write_consolidated(self, resultados: list[ResultadoImportacao], output_path: Path) -> Path:
        """Escreve todos os resultados nas mesmas 3 abas."""
        if not resultados:
            raise OutputError(str(output_path), "Não há resultados para consolidar")

        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escrever_excel(resultados, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    # =================================================================
    # Geração do Excel
    # =================================================================

    def _escrever_excel(self, resultados: list[ResultadoImportacao], output_path: Path) -> None:
        df_registros = pd.DataFrame(self._linhas_registros(resultados), columns=COLUNAS_REGISTROS)
        df_importacao = pd.DataFrame(self._linhas_importacao(resultados), columns=COLUNAS_IMPORTACAO)
        df_conciliacao = pd.DataFrame(self._linhas_conciliacao(resultados), columns=COLUNAS_CONCILIACAO)

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_registros.to_excel(writer, index=False, sheet_name="Registros")
            df_importacao.to_excel(writer, index=False, sheet_name="Importacao")
            df_conciliacao.to_excel(writer, index=False, sheet_name="Conciliacao")

            workbook = writer.book
            ws_registros = writer.sheets["Registros"]
            ws_importacao = writer.sheets["Importacao"]
            ws_conciliacao = writer.sheets["Conciliacao"]

            money_format = workbook.add_format({"num_format": "#,##0.00"})
            text_format = workbook.add_format({"num_format": "@"})

            ws_registros.set_column("A:A", 35)  # Polo
            ws_registros.set_column("B:B", 26)  # Categoria
            ws_registros.set_column("C:C", 14)  # Tipo
            ws_registros.set_column("D:D", 8)  # Parcela
            ws_registros.set_column("E:F", 15, money_format)  # Valores
            ws_registros.set_column("G:H", 6)  # Mês/Ano
            ws_registros.set_column("I:I", 12, text_format)  # Sigla
            ws_registros.set_column("J:K", 32)  # Import ID/Arquivo
            ws_registros.set_column("L:L", 14)

            ws_importacao.set_column("A:B", 32)
            ws_importacao.set_column("C:F", 14)
            ws_importacao.set_column("G:G", 20)

            ws_conciliacao.set_column("A:C", 30)
            ws_conciliacao.set_column("D:K", 18, money_format)
            ws_conciliacao.set_column("L:L", 14)

    @staticmethod
    def _linhas_registros(resultados: list[ResultadoImportacao]) -> list[dict]:
        linhas = []
        for resultado in resultados:
            for reg in resultado.registros:
                linhas.append(
                    {
                        "Polo": reg.polo,
                        "Categoria": reg.categoria,
                        "Tipo": reg.tipo,
                        "Parcela": reg.parcela,
                        "Valor Pago": float(reg.valor_pago),
                        "Valor Repasse": float(reg.valor_repasse),
                        "Mês": reg.referencia_mes,
                        "Ano": reg.referencia_ano,
                        "Sigla Curso": reg.sigla_curso or "",
                        "Import ID": reg.import_id,
                        "Arquivo": reg.nome_arquivo,
                        "Tipo Importação": reg.tipo_importacao,
                    }
                )
        return linhas

    @staticmethod
    def _linhas_importacao(resultados: list[ResultadoImportacao]) -> list[dict]:
        linhas = []
        for resultado in resultados:
            if not resultado.registros:
                continue
            log = LogImportacao.desde_registros(resultado.registros)
            linhas.append(
                {
                    "Import ID": log.import_id,
                    "Arquivo": log.nome_arquivo,
                    "Total Registros": log.total_registros,
                    "Mês": log.referencia_mes,
                    "Ano": log.referencia_ano,
                    "Tipo Importação": log.tipo_importacao,
                    "Data Importação": log.data_importacao.strftime("%d/%m/%Y %H:%M"),
                }
            )
        return linhas

    @staticmethod
    def _linhas_conciliacao(resultados: list[ResultadoImportacao]) -> list[dict]:
        linhas = []
        for resultado in resultados:
            if resultado.dados is None:
                continue
            for polo in resultado.dados.polos:
                c = linha_conciliacao(polo)
                linhas.append(
                    {
                        "Arquivo": resultado.nome_arquivo,
                        "Polo": c["polo"],
                        "Razão Social": c["razao_social"],
                        "Total Bruto Informado": _float_ou_none(c["total_bruto_informado"]),
                        "Soma Bruto Detalhe": float(c["soma_bruto_detalhe"]),
                        "Resumo Total Pago": _float_ou_none(c["resumo_total_pago"]),
                        "Total Líquido Informado": _float_ou_none(c["total_liquido_informado"]),
                        "Soma Líquido Detalhe": float(c["soma_liquido_detalhe"]),
                        "Resumo Total Repasse": _float_ou_none(c["resumo_total_repasse"]),
                        "Total Descontos Informado": _float_ou_none(c["total_descontos_informado"]),
                        "Soma Descontos Detalhe": float(c["soma_descontos_detalhe"]),
                        "Discrepâncias": c["discrepancias"],
                    }
                )
        return linhas
