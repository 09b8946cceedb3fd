"""
Mapeamento de nomes de meses e leitura do mês de referência do repasse.

O relatório traz o mês de referência como texto livre, por exemplo
"JANEIRO/2024" ou "REPASSE FEVEREIRO/2023". O lookup é sempre feito em
minúsculas. "Março" aparece com e sem cedilha dependendo do gerador.
"""

from datetime import date

from src.domain.shared.text_cleaner import leading_int

_MONTH_MAP: dict[str, int] = {
    "janeiro": 1,
    "fevereiro": 2,
    "março": 3,
    "marco": 3,
    "abril": 4,
    "maio": 5,
    "junho": 6,
    "julho": 7,
    "agosto": 8,
    "setembro": 9,
    "outubro": 10,
    "novembro": 11,
    "dezembro": 12,
}

_PREFIXO_REPASSE = "repasse"


def month_to_int(month_name: str) -> int | None:
    """Converte o nome de um mês em português para 1-12.

    Devolve None se o nome não for reconhecido.

    Exemplos:
        >>> month_to_int("Janeiro")
        1
        >>> month_to_int("marco")
        3
        >>> month_to_int("xyz") is None
        True
    """
    return _MONTH_MAP.get(month_name.strip().lower())


def parse_reference_period(
    reference: str | None,
    today: date | None = None,
) -> tuple[int, int]:
    """Converte o rótulo do mês de referência em (mês, ano).

    Regras de fallback (independentes entre si):
    - Texto vazio/None, ou sem "/" → (mês atual, ano atual).
    - Mês não reconhecido → mês atual, mantendo o ano lido.
    - Ano ilegível, zero ou negativo → ano atual, mantendo o mês lido.

    Args:
        reference: Texto como "JANEIRO/2024" ou "REPASSE FEVEREIRO/2023".
        today: Data usada como "atual". Por padrão, date.today().

    Returns:
        Tupla (mes, ano). O mês sempre está em 1-12.

    Exemplos:
        >>> parse_reference_period("JANEIRO/2024")
        (1, 2024)
        >>> parse_reference_period("REPASSE FEVEREIRO/2023")
        (2, 2023)
    """
    if today is None:
        today = date.today()

    if not reference:
        return (today.month, today.year)

    cleaned = reference.lower().replace(_PREFIXO_REPASSE, "", 1).strip()
    parts = cleaned.split("/")
    if len(parts) < 2:
        return (today.month, today.year)

    mes = month_to_int(parts[0]) or today.month
    ano = leading_int(parts[1])
    if ano <= 0:
        ano = today.year
    return (mes, ano)
