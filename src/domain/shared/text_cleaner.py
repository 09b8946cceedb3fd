"""
Utilidades de limpeza de texto.

Funções reutilizáveis para normalizar o texto extraído das células do
relatório antes de os parsers o interpretarem. Não têm regra de negócio:
operam apenas sobre strings.
"""

import re
import unicodedata

_LEADING_INT: re.Pattern[str] = re.compile(r"^\s*([+-]?\d+)")


def clean_whitespace(text: str) -> str:
    """Substitui sequências de espaços/tabs/quebras por um único espaço e faz strip.

    É a normalização aplicada a todo texto de célula. Inclui o espaço
    não separável (&nbsp;) que os relatórios HTML usam com frequência.

    Exemplos:
        >>> clean_whitespace("  RECEITA   GRADUAÇÃO \\n")
        'RECEITA GRADUAÇÃO'
    """
    return re.sub(r"\s+", " ", text).strip()


def strip_accents(text: str) -> str:
    """Remove acentos e cedilha, mantendo as letras base.

    Usado para comparar títulos de seção que aparecem ora acentuados,
    ora não ("PÓS-GRADUAÇÃO" / "POS-GRADUACAO").

    Exemplos:
        >>> strip_accents("RECEITA TÉCNICO")
        'RECEITA TECNICO'
        >>> strip_accents("SERVIÇO")
        'SERVICO'
    """
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def leading_int(text: str | None, default: int = 0) -> int:
    """Lê o inteiro no início do texto, como um parseInt.

    "3/12" → 3, " 07 " → 7, "abc" → default, "" → default.

    Exemplos:
        >>> leading_int("3/12")
        3
        >>> leading_int("abc")
        0
    """
    if not text:
        return default
    match = _LEADING_INT.match(text)
    if not match:
        return default
    return int(match.group(1))


def is_digits_only(text: str) -> bool:
    """Indica se o texto é composto só por dígitos (ex.: código de polo "12345")."""
    return bool(re.fullmatch(r"\d+", text))
