"""
Serviço de domínio: Transformador de registros.

Converte DadosExtraidos (texto bruto por polo) em RegistroFinanceiro
canônicos, prontos para gravação.

REGRAS:
1. Cada coleção de receita tem categoria fixa:
       graduacao          → Receita Graduação
       pos_graduacao      → Receita Pós-Graduação
       tecnico            → Receita Técnico
       profissionalizante → Receita Profissionalizantes
       universo_ead       → Outras Receitas
2. Descontos → polo do bloco, categoria "Outras Receitas", tipo "Descontos".
3. Tipo vazio → "Mensalidade". Tipo desconhecido → "Mensalidade" + aviso.
4. Parcela: inteiro inicial do texto, 0 se não houver.
5. Valores: parse_currency, gravados em valor absoluto.
6. Polo do aluno substitui o polo do bloco SE não vazio, com mais de 2
   caracteres e não só dígitos. Códigos numéricos são erro de digitação
   no sistema de origem, não nomes de cidade.
7. Todos os registros de uma chamada compartilham o mesmo import_id:
   "<nome_arquivo>_<epoch em milissegundos>".
8. Zero registros → aviso em `erros`, nunca exceção.
"""

from collections.abc import Callable
from datetime import date, datetime
from decimal import Decimal

from src.domain.models.polo_extraido import DadosExtraidos, PoloExtraido
from src.domain.models.registro_extraido import RegistroExtraido
from src.domain.models.registro_financeiro import (
    CATEGORIA_GRADUACAO,
    CATEGORIA_OUTRAS_RECEITAS,
    CATEGORIA_POS_GRADUACAO,
    CATEGORIA_PROFISSIONALIZANTES,
    CATEGORIA_TECNICO,
    IMPORTACAO_NEAD,
    TIPO_ACORDO,
    TIPO_DESCONTOS,
    TIPO_MENSALIDADE,
    TIPO_SERVICO,
    RegistroFinanceiro,
)
from src.domain.models.resultado_importacao import ResultadoImportacao
from src.domain.shared.money import parse_currency
from src.domain.shared.month_map import parse_reference_period
from src.domain.shared.text_cleaner import is_digits_only, leading_int, strip_accents

POLO_DESCONHECIDO = "Desconhecido"
MENSAGEM_SEM_REGISTROS = "Nenhum registro foi extraído. Verifique o conteúdo do HTML."

# Texto do relatório (sem acento, maiúsculo) → tipo canônico
_TIPOS_NORMALIZADOS: dict[str, str] = {
    "MENSALIDADE": TIPO_MENSALIDADE,
    "ACORDO": TIPO_ACORDO,
    "SERVICO": TIPO_SERVICO,
    "DESCONTO": TIPO_DESCONTOS,
    "DESCONTOS": TIPO_DESCONTOS,
}


def _categorias_por_colecao(polo: PoloExtraido) -> list[tuple[list[RegistroExtraido], str]]:
    return [
        (polo.receitas_graduacao, CATEGORIA_GRADUACAO),
        (polo.receitas_pos_graduacao, CATEGORIA_POS_GRADUACAO),
        (polo.receitas_tecnico, CATEGORIA_TECNICO),
        (polo.receitas_profissionalizante, CATEGORIA_PROFISSIONALIZANTES),
        (polo.receitas_universo_ead, CATEGORIA_OUTRAS_RECEITAS),
    ]


def usar_polo_aluno(polo_aluno: str | None) -> bool:
    """Indica se o polo declarado pelo aluno deve substituir o do bloco.

    Exemplos:
        >>> usar_polo_aluno("Campinas - Unidade B - SP")
        True
        >>> usar_polo_aluno("12345")
        False
        >>> usar_polo_aluno("SP")
        False
    """
    if not polo_aluno:
        return False
    return len(polo_aluno) > 2 and not is_digits_only(polo_aluno)


def normalizar_tipo(tipo_lancamento: str | None) -> str | None:
    """Converte o tipo do relatório no conjunto fechado de tipos.

    Vazio → Mensalidade. Desconhecido → None (quem chama decide o padrão).

    Exemplos:
        >>> normalizar_tipo("SERVIÇO")
        'Serviço'
        >>> normalizar_tipo("")
        'Mensalidade'
        >>> normalizar_tipo("Taxa extra") is None
        True
    """
    if not tipo_lancamento or not tipo_lancamento.strip():
        return TIPO_MENSALIDADE
    chave = strip_accents(tipo_lancamento).strip().upper()
    return _TIPOS_NORMALIZADOS.get(chave)


def gerar_import_id(file_name: str, agora: datetime | None = None) -> str:
    """Identificador do lote: "<nome_arquivo>_<epoch em milissegundos>"."""
    momento = agora or datetime.now()
    return f"{file_name}_{int(momento.timestamp() * 1000)}"


def _valor(texto: str) -> Decimal:
    return abs(parse_currency(texto))


def transform_records(
    dados: DadosExtraidos,
    file_name: str,
    log: Callable[[str], None],
    agora: datetime | None = None,
    today: date | None = None,
) -> ResultadoImportacao:
    """Transforma os dados extraídos de um relatório NEAD em registros.

    Args:
        dados: Saída do scanner de seções.
        file_name: Nome do arquivo de origem.
        log: Callback de eventos.
        agora: Momento usado no import_id. Injetável para testes.
        today: Data usada como padrão do período de referência.

    Returns:
        ResultadoImportacao com os registros e, se vazio, um aviso.
    """
    import_id = gerar_import_id(file_name, agora)
    referencia_mes, referencia_ano = parse_reference_period(dados.mes_referencia, today)

    registros: list[RegistroFinanceiro] = []

    for polo in dados.polos:
        nome_polo = polo.nome_polo or POLO_DESCONHECIDO
        log(f"[INFO] Transformando dados do polo: {nome_polo}")

        for coletados, categoria in _categorias_por_colecao(polo):
            for rec in coletados:
                tipo = normalizar_tipo(rec.tipo_lancamento)
                if tipo is None:
                    log(
                        f"[AVISO] Tipo de lançamento desconhecido '{rec.tipo_lancamento}' "
                        f"no polo {nome_polo}. Usando {TIPO_MENSALIDADE}."
                    )
                    tipo = TIPO_MENSALIDADE

                registros.append(
                    RegistroFinanceiro(
                        polo=rec.polo_aluno if usar_polo_aluno(rec.polo_aluno) else nome_polo,
                        categoria=categoria,
                        tipo=tipo,
                        parcela=leading_int(rec.parcela),
                        valor_pago=_valor(rec.valor_bruto),
                        valor_repasse=_valor(rec.valor_liquido),
                        referencia_mes=referencia_mes,
                        referencia_ano=referencia_ano,
                        import_id=import_id,
                        nome_arquivo=file_name,
                        tipo_importacao=IMPORTACAO_NEAD,
                        sigla_curso=rec.sigla_curso or None,
                    )
                )

        for desconto in polo.descontos:
            registros.append(
                RegistroFinanceiro(
                    polo=nome_polo,
                    categoria=CATEGORIA_OUTRAS_RECEITAS,
                    tipo=TIPO_DESCONTOS,
                    parcela=leading_int(desconto.parcela),
                    valor_pago=_valor(desconto.valor_bruto),
                    valor_repasse=_valor(desconto.valor_liquido),
                    referencia_mes=referencia_mes,
                    referencia_ano=referencia_ano,
                    import_id=import_id,
                    nome_arquivo=file_name,
                    tipo_importacao=IMPORTACAO_NEAD,
                )
            )

    erros: list[str] = []
    if not registros:
        erros.append(MENSAGEM_SEM_REGISTROS)
        log(f"[AVISO] {MENSAGEM_SEM_REGISTROS}")
    else:
        log(
            f"[SUCESSO] Transformação concluída. Total de {len(registros)} "
            "registros prontos para importação."
        )

    return ResultadoImportacao(registros=registros, erros=erros, nome_arquivo=file_name, dados=dados)
