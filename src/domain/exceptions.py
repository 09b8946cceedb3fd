"""
Exceções de domínio do importador de repasses.

O conteúdo malformado de um relatório NUNCA gera exceção: os parsers
degradam para valores padrão e registram avisos. As exceções abaixo são
lançadas apenas nas bordas (leitura do arquivo, identificação do layout,
falha inesperada de um parser, escrita da saída) e permitem ao
ImportProcessor distinguir "arquivo ilegível" de "layout desconhecido".

Hierarquia:
    ImportacaoBaseError
    ├── ReportNaoIdentificadoError  → Nenhum layout conhecido reconhece o HTML
    ├── FormatoInvalidoError        → O arquivo não é do tipo esperado
    ├── ExtractionError             → Falha ao ler/decodificar o arquivo
    ├── ParseError                  → Falha inesperada dentro de um parser
    └── OutputError                 → Falha ao gerar o arquivo de saída
"""


class ImportacaoBaseError(Exception):
    """Exceção base do projeto. Todas as demais herdam desta."""


class ReportNaoIdentificadoError(ImportacaoBaseError):
    """Lançada quando o identificador não reconhece o layout do relatório.

    Pode acontecer porque:
    - O HTML está vazio ou truncado (sessão expirada no sistema de origem).
    - É uma página de erro/login em vez do relatório.
    - É um layout novo que ainda não tem parser.
    """

    def __init__(self, arquivo: str, detalhe: str = ""):
        self.arquivo = arquivo
        self.detalhe = detalhe
        mensagem = f"Não foi possível identificar o tipo de relatório do arquivo: {arquivo}"
        if detalhe:
            mensagem += f": {detalhe}"
        super().__init__(mensagem)


class FormatoInvalidoError(ImportacaoBaseError):
    """Lançada quando um arquivo não tem o formato esperado.

    Exemplos:
    - Esperava-se um .html, mas o arquivo é um .pdf.
    - O arquivo é binário.
    """

    def __init__(self, arquivo: str, formato_esperado: str, detalhe: str = ""):
        self.arquivo = arquivo
        self.formato_esperado = formato_esperado
        mensagem = f"Formato inválido em '{arquivo}'. Esperado: {formato_esperado}"
        if detalhe:
            mensagem += f": {detalhe}"
        super().__init__(mensagem)


class ExtractionError(ImportacaoBaseError):
    """Lançada quando falha a leitura do conteúdo de um arquivo."""

    def __init__(self, arquivo: str, causa: str):
        self.arquivo = arquivo
        self.causa = causa
        super().__init__(f"Erro lendo '{arquivo}': {causa}")


class ParseError(ImportacaoBaseError):
    """Lançada quando um parser falha por um motivo que não é conteúdo.

    Conteúdo malformado vira aviso ou valor padrão. Esta exceção cobre o
    resto (um bug do parser, uma célula que escapa das defesas) e permite
    ao ImportProcessor seguir para o próximo arquivo.
    """

    def __init__(self, tipo_relatorio: str, arquivo: str, causa: str):
        self.tipo_relatorio = tipo_relatorio
        self.arquivo = arquivo
        self.causa = causa
        super().__init__(f"Erro no parser {tipo_relatorio} em '{arquivo}': {causa}")


class OutputError(ImportacaoBaseError):
    """Lançada quando falha a geração do arquivo de saída.

    Pode acontecer por falta de permissão de escrita, disco cheio ou
    arquivo aberto em outro programa.
    """

    def __init__(self, caminho_saida: str, causa: str):
        self.caminho_saida = caminho_saida
        self.causa = causa
        super().__init__(f"Erro gerando saída em '{caminho_saida}': {causa}")
