"""
Adaptador de entrada: Parser do relatório de repasse NEAD.

CONTEXTO DO PROBLEMA:
O sistema acadêmico externo exporta o repasse mensal como HTML pensado
para impressão. Não há marcação semântica: um polo começa numa linha com
fundo cinza, uma seção começa num título de 20px em negrito, e os dados de
cada seção estão numa tabela aninhada dentro da linha SEGUINTE ao título.

LÓGICA DE PARSE:
1. Metadados: tabela .rDetalhes → UNIDADE:, REPASSE:, PERÍODO:.
2. Linhas principais: div#conteudo > table.rRelatorio, em ordem.
3. Máquina de estados sobre as linhas (EstadoVarredura):
       cabeçalho de polo → fecha o polo aberto (extrai o RESUMO), abre outro
       qualquer linha com polo aberto → acumula o HTML no buffer do polo
       título de seção → define a categoria e CONSOME a próxima linha
       rótulo de total → preenche total_bruto/descontos/liquido do polo
4. Fim do documento fecha o polo aberto.
5. transform_records gera os RegistroFinanceiro.

Cada linha é visitada uma vez; consumir a linha após o título é o único
lookahead.
"""

import re
from dataclasses import dataclass, field, replace
from datetime import date, datetime

from bs4 import BeautifulSoup, Tag

from src.adapters.input.report_parsers.nead_markers import (
    CATEGORIA_DESCONTO,
    CATEGORIA_RECEITA_GRADUACAO,
    CATEGORIA_RECEITA_POS_GRADUACAO,
    CATEGORIA_RECEITA_PROFISSIONALIZANTE,
    CATEGORIA_RECEITA_TECNICO,
    CATEGORIA_RECEITA_UNIVERSO_EAD,
    cell_text,
    classify_category,
    classify_total_label,
    direct_rows,
    find_section_title,
    find_total_label,
    is_polo_header,
    total_value_cell,
)
from src.adapters.input.report_parsers.nested_records import (
    extrair_desconto,
    extrair_receita,
    extrair_receita_universo_ead,
)
from src.adapters.input.report_parsers.resumo_extractor import extract_resumo
from src.domain.exceptions import ParseError
from src.domain.models.polo_extraido import DadosExtraidos, PoloExtraido
from src.domain.models.resultado_importacao import ResultadoImportacao
from src.domain.ports.report_parser import LogSink, ReportParser, descartar_log
from src.domain.services.record_transformer import transform_records

REPORT_KIND_NEAD = "NEAD"

MAIN_ROWS_TABLE_SELECTOR = "div#conteudo > table.rRelatorio"
NESTED_TABLE_SELECTOR = "table.rRelatorio"
DETAILS_SELECTOR = ".rDetalhes"

# Categoria do título → atributo de PoloExtraido que recebe os registros
_COLECAO_RECEITA: dict[str, str] = {
    CATEGORIA_RECEITA_GRADUACAO: "receitas_graduacao",
    CATEGORIA_RECEITA_POS_GRADUACAO: "receitas_pos_graduacao",
    CATEGORIA_RECEITA_TECNICO: "receitas_tecnico",
    CATEGORIA_RECEITA_PROFISSIONALIZANTE: "receitas_profissionalizante",
}


@dataclass
class EstadoVarredura:
    """Acumulador da máquina de estados do scanner.

    As transições de polo e de seção devolvem um novo estado
    (dataclasses.replace). O PoloExtraido aberto e o buffer recebem linhas
    no lugar: os dois pertencem a esta chamada de parse e são trocados por
    objetos novos quando um polo abre ou fecha.
    """

    polo: PoloExtraido | None = None
    categoria: str | None = None
    buffer: list[str] = field(default_factory=list)
    polos: list[PoloExtraido] = field(default_factory=list)


# =================================================================
# Transições
# =================================================================


def fechar_polo(estado: EstadoVarredura, log: LogSink) -> EstadoVarredura:
    """Fecha o polo aberto: extrai o RESUMO do buffer e o empurra para polos."""
    if estado.polo is None:
        return estado
    log(f"[INFO] Finalizando polo: {estado.polo.nome_polo}. Extraindo resumo...")
    fechado = replace(estado.polo, resumo=extract_resumo("".join(estado.buffer)))
    return replace(estado, polo=None, buffer=[], polos=[*estado.polos, fechado])


def abrir_polo(estado: EstadoVarredura, row: Tag, log: LogSink) -> EstadoVarredura:
    """Fecha o polo anterior (se houver) e abre um novo a partir do cabeçalho."""
    estado = fechar_polo(estado, log)
    cells = row.find_all("td")

    def texto(indice: int) -> str:
        return cell_text(cells[indice]) if indice < len(cells) else ""

    polo = PoloExtraido(
        razao_social=texto(0).replace("CONVENIADO", "", 1).strip(),
        nome_polo=parse_nome_polo(texto(1)),
        dados_bancarios=texto(2),
    )
    log(f"[INFO] Novo polo iniciado: {polo.nome_polo}")
    return replace(estado, polo=polo, buffer=[])


def parse_nome_polo(texto: str) -> str:
    """Remove "POLO/CONVÊNIO" (sem diferenciar maiúsculas) e o hífen inicial.

    Exemplo:
        >>> parse_nome_polo("POLO/CONVÊNIO - BOTUCATU")
        'BOTUCATU'
    """
    sem_prefixo = re.sub(r"POLO/CONVÊNIO", "", texto, flags=re.IGNORECASE).strip()
    return re.sub(r"^-\s*", "", sem_prefixo)


def acumular(estado: EstadoVarredura, row: Tag) -> EstadoVarredura:
    """Anexa o HTML da linha ao buffer do polo aberto."""
    if estado.polo is not None:
        estado.buffer.append(str(row))
    return estado


def registrar_total(estado: EstadoVarredura, row: Tag) -> EstadoVarredura:
    """Preenche o total do polo correspondente ao rótulo em negrito da linha."""
    label = find_total_label(row)
    if label is None or estado.polo is None:
        return estado
    campo = classify_total_label(cell_text(label))
    if campo is None:
        return estado
    setattr(estado.polo, campo, cell_text(total_value_cell(label)))
    return estado


def processar_tabela_aninhada(
    polo: PoloExtraido,
    categoria: str | None,
    content_row: Tag,
    log: LogSink,
) -> None:
    """Extrai as linhas da tabela aninhada e as anexa à coleção da categoria."""
    nested = content_row.select_one(NESTED_TABLE_SELECTOR)
    if nested is None:
        log(f"[AVISO] Nenhuma tabela aninhada encontrada para a categoria: {categoria}")
        return

    log(f"[INFO] Processando tabela aninhada da categoria: {categoria}")
    for data_row in direct_rows(nested):
        if categoria == CATEGORIA_DESCONTO:
            desconto = extrair_desconto(data_row)
            if desconto is not None:
                polo.descontos.append(desconto)
        elif categoria == CATEGORIA_RECEITA_UNIVERSO_EAD:
            registro = extrair_receita_universo_ead(data_row)
            if registro is not None:
                polo.receitas_universo_ead.append(registro)
        elif categoria in _COLECAO_RECEITA:
            registro = extrair_receita(data_row)
            if registro is not None:
                getattr(polo, _COLECAO_RECEITA[categoria]).append(registro)


def abrir_secao(
    estado: EstadoVarredura,
    title: Tag,
    content_row: Tag | None,
    log: LogSink,
) -> EstadoVarredura:
    """Define a categoria ativa e processa a linha de conteúdo consumida."""
    titulo = cell_text(title).upper()
    log(f"[INFO] Título de seção encontrado: {titulo}")

    categoria = classify_category(titulo)
    if categoria is None:
        log(f"[AVISO] Seção não reconhecida: {titulo}. Linhas ignoradas.")
    estado = replace(estado, categoria=categoria)

    if content_row is None or estado.polo is None:
        return estado

    estado = acumular(estado, content_row)
    processar_tabela_aninhada(estado.polo, categoria, content_row, log)
    return estado


def varrer_linhas(rows: list[Tag], log: LogSink) -> list[PoloExtraido]:
    """Executa a máquina de estados sobre as linhas principais.

    Returns:
        Os polos fechados, na ordem do documento. Há exatamente um por
        linha de cabeçalho de polo encontrada.
    """
    estado = EstadoVarredura()
    i = 0
    while i < len(rows):
        row = rows[i]
        i += 1
        if row.find("td") is None:
            continue

        if is_polo_header(row):
            estado = abrir_polo(estado, row, log)

        estado = acumular(estado, row)

        title = find_section_title(row)
        if title is not None:
            content_row = rows[i] if i < len(rows) else None
            i += 1
            estado = abrir_secao(estado, title, content_row, log)
            continue

        estado = registrar_total(estado, row)

    estado = fechar_polo(estado, log)
    return estado.polos


# =================================================================
# Parser
# =================================================================


class NeadReportParser(ReportParser):
    """Parser do relatório de repasse NEAD (layout rRelatorio/rDetalhes)."""

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
        return REPORT_KIND_NEAD

    def parse(
        self,
        html: str,
        file_name: str = "",
        log: LogSink = descartar_log,
    ) -> ResultadoImportacao:
        try:
            dados = self.extract_data(html, log)
            return transform_records(dados, file_name, log, agora=self._agora, today=self._today)
        except Exception as e:
            raise ParseError(self.report_kind, file_name, str(e)) from e

    def extract_data(self, html: str, log: LogSink = descartar_log) -> DadosExtraidos:
        """Etapas 1-4: HTML → DadosExtraidos, sem conversão de valores."""
        log("[INFO] Lendo HTML com BeautifulSoup (lxml).")
        soup = BeautifulSoup(html, "lxml")

        dados = self._extract_metadata(soup, log)

        rows = self._main_rows(soup)
        log(f"[INFO] Encontradas {len(rows)} linhas principais para processar.")

        dados.polos = varrer_linhas(rows, log)
        log("[SUCESSO] Leitura do HTML concluída.")
        return dados

    def _extract_metadata(self, soup: BeautifulSoup, log: LogSink) -> DadosExtraidos:
        dados = DadosExtraidos()
        details = soup.select_one(DETAILS_SELECTOR)
        if details is None:
            log("[AVISO] Tabela de detalhes (.rDetalhes) não encontrada.")
            return dados

        log("[INFO] Tabela de detalhes encontrada. Extraindo metadados...")
        for row in details.find_all("tr"):
            cells = row.find_all("td")
            if len(cells) < 2:
                continue
            label = cell_text(cells[0]).upper()
            value = cell_text(cells[1])
            if "UNIDADE:" in label:
                dados.nome_unidade = value
            elif "REPASSE:" in label:
                dados.mes_referencia = value
            elif "PERÍODO:" in label or "PERIODO:" in label:
                dados.periodo = value

        log(
            f"[SUCESSO] Metadados extraídos: Unidade={dados.nome_unidade}, "
            f"Mês={dados.mes_referencia}"
        )
        return dados

    def _main_rows(self, soup: BeautifulSoup) -> list[Tag]:
        rows: list[Tag] = []
        for table in soup.select(MAIN_ROWS_TABLE_SELECTOR):
            rows.extend(direct_rows(table))
        return rows
