"""
Judicial vocabulary used to route press articles between analysis tiers.

Keywords are stored already normalised (lowercase, no diacritics) so they can
be compared directly against text passed through
:func:`transparence.utils.text.normalize_text`. Entries containing a space are
matched as phrases; single words are matched on word boundaries so that
``viol`` does not fire on ``violation``.
"""

from __future__ import annotations

from typing import Tuple

# Procedure and legal-process vocabulary.
PROCEDURAL_KEYWORDS: Tuple[str, ...] = (
    "mis en examen",
    "mise en examen",
    "garde a vue",
    "perquisition",
    "perquisitions",
    "enquete preliminaire",
    "information judiciaire",
    "juge d'instruction",
    "controle judiciaire",
    "detention provisoire",
    "renvoi devant",
    "poursuites judiciaires",
    "peine de prison",
    "prison ferme",
    "avec sursis",
    "condamne",
    "condamnee",
    "condamnes",
    "condamnation",
    "inculpe",
    "inculpee",
    "proces",
    "juge",
    "jugee",
    "jugement",
    "relaxe",
    "relaxee",
    "acquitte",
    "acquittement",
    "non-lieu",
    "requisitoire",
    "plainte",
    "ineligibilite",
)

# Offence names.
OFFENSE_KEYWORDS: Tuple[str, ...] = (
    "corruption",
    "detournement",
    "detournement de fonds",
    "fraude",
    "fraude fiscale",
    "blanchiment",
    "abus de biens sociaux",
    "abus de confiance",
    "trafic d'influence",
    "prise illegale d'interets",
    "favoritisme",
    "emploi fictif",
    "emplois fictifs",
    "financement illegal",
    "harcelement moral",
    "harcelement sexuel",
    "agression sexuelle",
    "viol",
    "recel",
    "escroquerie",
    "concussion",
    "faux et usage de faux",
    "diffamation",
)

# Courts, prosecutors and investigating bodies.
JURISDICTION_KEYWORDS: Tuple[str, ...] = (
    "tribunal correctionnel",
    "tribunal judiciaire",
    "cour d'appel",
    "cour de cassation",
    "cour d'assises",
    "cour de justice de la republique",
    "parquet national financier",
    "pnf",
    "parquet",
    "oclciff",
)

JUDICIAL_KEYWORDS: Tuple[str, ...] = (
    PROCEDURAL_KEYWORDS + OFFENSE_KEYWORDS + JURISDICTION_KEYWORDS
)
