"""
Utilidades para tratamento de valores monetários.

CONTEXTO DO PROBLEMA:
Os relatórios de repasse chegam de geradores diferentes, e cada um escreve
os valores num formato regional distinto:

- "1.234,56"   → formato brasileiro (ponto = milhar, vírgula = decimal)
- "1,234.56"   → formato americano (vírgula = milhar, ponto = decimal)
- "R$ 10,00"   → com símbolo de moeda
- "-" ou ""    → célula vazia, vale zero

Não existe metadado que diga qual convenção foi usada. A única pista é a
posição dos separadores: o separador mais à direita é o decimal.

REGRAS:
1. Sempre devolve Decimal (nunca float, nunca NaN).
2. Nunca lança exceção por conteúdo: um valor ilegível vale Decimal("0").
   Uma célula ruim não pode abortar a importação do mês inteiro.
"""

import re
from decimal import Decimal, InvalidOperation

# Mesmo comportamento de um parse "de prefixo": lê o número no início
# do texto e ignora o que vier depois ("12.50abc" → 12.50).
_LEADING_NUMBER: re.Pattern[str] = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Expoente decimal máximo (em módulo) de um valor aceito. Fora dessa faixa
# o texto não é dinheiro, e operações como abs() estourariam o contexto.
_MAX_EXPOENTE = 15


def parse_currency(text: str | None) -> Decimal:
    """Converte um texto monetário em Decimal usando a regra do separador
    mais à direita.

    Algoritmo:
    1. Remove o primeiro "R$" e espaços das pontas.
    2. "" ou "-" → 0.
    3. Se a última vírgula está à direita do último ponto, é formato
       brasileiro: remove os pontos e troca a vírgula por ponto.
    4. Caso contrário (inclui "sem separador"), remove as vírgulas.
    5. Lê o número no início do texto resultante; se não houver, 0.
    6. Expoentes fora de ±15 ("1e1000000") → 0.

    Args:
        text: Texto da célula. Pode ser None.

    Returns:
        Decimal com o valor. Decimal("0") para entradas ilegíveis.

    Exemplos:
        >>> parse_currency("1.234,56")
        Decimal('1234.56')
        >>> parse_currency("1,234.56")
        Decimal('1234.56')
        >>> parse_currency("R$ 10,00")
        Decimal('10.00')
        >>> parse_currency("-")
        Decimal('0')
    """
    if not text:
        return Decimal("0")

    cleaned = str(text).replace("R$", "", 1).strip()
    if cleaned in ("", "-"):
        return Decimal("0")

    last_comma = cleaned.rfind(",")
    last_dot = cleaned.rfind(".")

    if last_comma > last_dot:
        number_text = cleaned.replace(".", "").replace(",", ".", 1)
    else:
        number_text = cleaned.replace(",", "")

    match = _LEADING_NUMBER.match(number_text.lstrip())
    if not match:
        return Decimal("0")

    try:
        result = Decimal(match.group(0))
    except InvalidOperation:
        return Decimal("0")

    if not result.is_finite() or abs(result.adjusted()) > _MAX_EXPOENTE:
        return Decimal("0")
    return result


def format_money(amount: Decimal) -> str:
    """Formata um Decimal no padrão brasileiro para logs e console.

    Exemplos:
        >>> format_money(Decimal("1234567.89"))
        'R$ 1.234.567,89'
        >>> format_money(Decimal("0"))
        'R$ 0,00'
    """
    amount = amount.quantize(Decimal("0.01"))
    texto = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    if amount < 0:
        return f"-R$ {texto}"
    return f"R$ {texto}"
