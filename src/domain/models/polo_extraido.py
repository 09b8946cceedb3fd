"""
Modelos de extração: bloco de um polo e o documento inteiro.

Ciclo de vida de um PoloExtraido:
- Criado quando o scanner encontra uma linha de cabeçalho de polo.
- Recebe registros, descontos e totais enquanto está aberto.
- Fechado (RESUMO anexado, empurrado para DadosExtraidos.polos) quando
  aparece o próximo cabeçalho de polo ou o documento termina.
"""

from dataclasses import dataclass, field

from src.domain.models.registro_extraido import DescontoExtraido, RegistroExtraido
from src.domain.models.resumo_categorias import ResumoCategorias


@dataclass
class PoloExtraido:
    """Um bloco de polo do relatório de repasse."""

    razao_social: str = ""
    nome_polo: str = ""
    """Nome de exibição, já sem "POLO/CONVÊNIO" e sem o hífen inicial."""

    dados_bancarios: str = ""

    receitas_graduacao: list[RegistroExtraido] = field(default_factory=list)
    receitas_pos_graduacao: list[RegistroExtraido] = field(default_factory=list)
    receitas_tecnico: list[RegistroExtraido] = field(default_factory=list)
    receitas_profissionalizante: list[RegistroExtraido] = field(default_factory=list)
    receitas_universo_ead: list[RegistroExtraido] = field(default_factory=list)
    descontos: list[DescontoExtraido] = field(default_factory=list)

    total_bruto: str | None = None
    total_descontos: str | None = None
    total_liquido: str | None = None

    resumo: ResumoCategorias | None = None

    @property
    def todas_receitas(self) -> list[RegistroExtraido]:
        """As cinco coleções de receita concatenadas, na ordem do relatório."""
        return (
            self.receitas_graduacao
            + self.receitas_pos_graduacao
            + self.receitas_tecnico
            + self.receitas_profissionalizante
            + self.receitas_universo_ead
        )


@dataclass
class DadosExtraidos:
    """Raiz da extração: metadados do relatório e os polos encontrados."""

    nome_unidade: str | None = None
    mes_referencia: str | None = None
    periodo: str | None = None
    polos: list[PoloExtraido] = field(default_factory=list)
