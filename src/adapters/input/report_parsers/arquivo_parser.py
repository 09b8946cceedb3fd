"""
Adaptador de entrada: Parser da exportação simples ("Arquivo").

Layout mais antigo, gerado por planilha: uma tabela plana em que linhas
de célula única marcam o contexto e as demais são lançamentos.

    | Polo: Botucatu                                      |
    | Categoria: Receita Graduação                        |
    | Mensalidade | 3 | 1.200,00 | ... | 840,00 | JANEIRO/2024 |

Colunas de um lançamento (linhas com mais de 5 células):
    0 tipo, 1 parcela, 2 valor pago, 4 valor repasse, 5 referência.

Ao contrário do relatório NEAD, o período vem em cada linha.
"""

from datetime import date, datetime

from bs4 import BeautifulSoup

from src.adapters.input.report_parsers.nead_markers import cell_text
from src.domain.exceptions import ParseError
from src.domain.models.registro_financeiro import (
    IMPORTACAO_ARQUIVO,
    TIPO_MENSALIDADE,
    RegistroFinanceiro,
)
from src.domain.models.resultado_importacao import ResultadoImportacao
from src.domain.ports.report_parser import LogSink, ReportParser, descartar_log
from src.domain.services.record_transformer import (
    MENSAGEM_SEM_REGISTROS,
    POLO_DESCONHECIDO,
    gerar_import_id,
    normalizar_tipo,
)
from src.domain.shared.money import parse_currency
from src.domain.shared.month_map import parse_reference_period
from src.domain.shared.text_cleaner import leading_int

REPORT_KIND_ARQUIVO = "ARQUIVO"

MARCADOR_POLO = "Polo:"
MARCADOR_CATEGORIA = "Categoria:"
MIN_COLUNAS_LANCAMENTO = 6

COL_TIPO = 0
COL_PARCELA = 1
COL_VALOR_PAGO = 2
COL_VALOR_REPASSE = 4
COL_REFERENCIA = 5


class ArquivoReportParser(ReportParser):
    """Parser da exportação plana com linhas "Polo:" e "Categoria:"."""

    def __init__(
        self,
        agora: datetime | None = None,
        today: date | None = None,
    ) -> None:
        """
        Args:
            agora: Momento fixo para o import_id (testes). None = relógio.
            today: Data padrão do período de referência (testes).
        """
        self._agora = agora
        self._today = today

    @property
    def report_kind(self) -> str:
        return REPORT_KIND_ARQUIVO

    def parse(
        self,
        html: str,
        file_name: str = "",
        log: LogSink = descartar_log,
    ) -> ResultadoImportacao:
        try:
            return self._ler_lancamentos(html, file_name, log)
        except Exception as e:
            raise ParseError(self.report_kind, file_name, str(e)) from e

    def _ler_lancamentos(self, html: str, file_name: str, log: LogSink) -> ResultadoImportacao:
        soup = BeautifulSoup(html, "lxml")
        import_id = gerar_import_id(file_name, self._agora)

        polo_atual = ""
        categoria_atual = ""
        registros: list[RegistroFinanceiro] = []

        for row in soup.select("table tr"):
            cells = row.find_all("td")

            if len(cells) == 1:
                texto = cell_text(cells[0])
                if texto.startswith(MARCADOR_POLO):
                    polo_atual = texto.replace(MARCADOR_POLO, "", 1).strip()
                    log(f"[INFO] Polo: {polo_atual}")
                elif texto.startswith(MARCADOR_CATEGORIA):
                    categoria_atual = texto.replace(MARCADOR_CATEGORIA, "", 1).strip()
                    log(f"[INFO] Categoria: {categoria_atual}")
                continue

            if len(cells) < MIN_COLUNAS_LANCAMENTO:
                continue

            tipo_texto = cell_text(cells[COL_TIPO])
            tipo = normalizar_tipo(tipo_texto)
            if tipo is None:
                log(f"[AVISO] Tipo de lançamento desconhecido '{tipo_texto}'. Usando {TIPO_MENSALIDADE}.")
                tipo = TIPO_MENSALIDADE

            mes, ano = parse_reference_period(cell_text(cells[COL_REFERENCIA]), self._today)

            registros.append(
                RegistroFinanceiro(
                    polo=polo_atual or POLO_DESCONHECIDO,
                    categoria=categoria_atual,
                    tipo=tipo,
                    parcela=leading_int(cell_text(cells[COL_PARCELA])),
                    valor_pago=abs(parse_currency(cell_text(cells[COL_VALOR_PAGO]))),
                    valor_repasse=abs(parse_currency(cell_text(cells[COL_VALOR_REPASSE]))),
                    referencia_mes=mes,
                    referencia_ano=ano,
                    import_id=import_id,
                    nome_arquivo=file_name,
                    tipo_importacao=IMPORTACAO_ARQUIVO,
                )
            )

        erros: list[str] = []
        if not registros:
            erros.append(MENSAGEM_SEM_REGISTROS)
            log(f"[AVISO] {MENSAGEM_SEM_REGISTROS}")
        else:
            log(f"[SUCESSO] {len(registros)} registros lidos da exportação simples.")

        return ResultadoImportacao(registros=registros, erros=erros, nome_arquivo=file_name)
