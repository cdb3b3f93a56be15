from pathlib import Path

import pytest

from texmeta.bibliography import InMemoryBibliography, load_bibtex
from texmeta.parsers import MetadataParser, MetadataRecord

ARTICLE = r"""authors=given> Aurora Almeida de Miranda, family> Leão\par title=Euclides da Cunha atualizado no sertão da teledramaturgia\par first_page=15\par last_page=29\par abstract=O objeto deste artigo é a série \textit {Onde nascem os fortes} (TV Globo, 2018), escrita para exibição em canal aberto de televisão, em ano eleitoral e filmada no cariri paraibano. A partir do título e da ambiência, percebemos uma configuração que remete ao livro \textit {Os sertões} \citeyear {EcCUNHA1902sertoes}. Ademais, o território sertanejo revela-se como poderoso cronotopo \cite {EcBAKHTIN2003Estetica}, em forte simetria com a linha abissal da Sociologia das Ausências \cite {EcSANTOS2004Para}. Analisa-se as estratégias de construção narrativa \cite {EcMOTTA2013analise}, bem como os procedimentos de elaboração do roteiro \cite {EcMACIEL2017poder}. \par keywords=Onde nascem os fortes. Euclides da Cunha. Sertão. Teledramaturgia. Narrativa.\par section=Dossiê História dos Sertões: espaços, sentidos e saberes\par number=5\par semester=1\par year=2022
"""

BIBLIOGRAPHY = r"""
@book{EcBAKHTIN2003Estetica,
  author    = {Bakhtin, M.},
  title     = {Estética da criação verbal},
  location  = {São Paulo},
  publisher = {Martins Fontes},
  year      = {2003}
}
@book{EcCUNHA1902sertoes,
  author    = {Cunha, E.},
  title     = {Os sertões},
  location  = {São Paulo},
  publisher = {Editora Martin Claret},
  year      = {1902}
}
@book{EcMACIEL2017poder,
  author    = {Maciel, L. C.},
  title     = {O poder do clímax},
  subtitle  = {fundamentos do roteiro de cinema e TV},
  location  = {São Paulo},
  publisher = {Editora Giostri},
  year      = {2017}
}
@book{EcMENESES2andSANTOS2009Epistemologias,
  author    = {Meneses, M. P. AND Santos, B. S.},
  title     = {Epistemologias do Sul},
  location  = {Coimbra},
  publisher = {Edições Almedina},
  year      = {2009}
}
@book{EcMOTTA2013analise,
  author    = {Motta, L. G.},
  title     = {A análise crítica da narrativa},
  location  = {Brasília},
  publisher = {EdUnB},
  year      = {2013}
}
@incollection{EcSANTOS2004Para,
  author     = {Santos, B. S.},
  title      = {Para uma sociologia das ausências e uma sociologia das emergências},
  booktitle  = {Conhecimento prudente para uma vida decente},
  location   = {São Paulo},
  publisher  = {Cortez},
  year       = {2004}
}
"""


@pytest.fixture(scope="module")
def article_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Write the sample article and its bibliography once per module."""
    dir_path: Path = tmp_path_factory.mktemp("article")
    (dir_path / "article.tex").write_bytes(ARTICLE.encode())
    (dir_path / "refs.bib").write_text(BIBLIOGRAPHY, encoding="utf-8")
    return dir_path


@pytest.fixture(scope="module")
def parsed_article(article_dir: Path) -> MetadataRecord:
    with open(article_dir / "article.tex", "rb") as f:
        return MetadataParser().parse(f)


@pytest.fixture(scope="module")
def bibliography() -> InMemoryBibliography:
    return load_bibtex(BIBLIOGRAPHY)
