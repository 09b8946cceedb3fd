"""
Utilidades compartilhadas do domínio.

Estas funções são usadas pelos parsers de relatório e pelo transformador
de registros e não dependem de nenhuma biblioteca externa. Operam apenas
sobre tipos nativos do Python.

Uso:
    from src.domain.shared.money import parse_currency, format_money
    from src.domain.shared.month_map import parse_reference_period
    from src.domain.shared.text_cleaner import clean_whitespace, strip_accents
"""
