"""
Affair domain models.

Represents a judicial affair attached to a politician, together with the
press or court sources citing it, and the candidate duplicate groups produced
by the duplicate detector.

Responsibility: Affair entities and detector result structures
"""

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AffairStatus(str, Enum):
    """Procedural stage of an affair."""
    ENQUETE_PRELIMINAIRE = "ENQUETE_PRELIMINAIRE"
    INSTRUCTION = "INSTRUCTION"
    MISE_EN_EXAMEN = "MISE_EN_EXAMEN"
    RENVOI_TRIBUNAL = "RENVOI_TRIBUNAL"
    PROCES_EN_COURS = "PROCES_EN_COURS"
    CONDAMNATION_PREMIERE_INSTANCE = "CONDAMNATION_PREMIERE_INSTANCE"
    APPEL_EN_COURS = "APPEL_EN_COURS"
    CONDAMNATION_DEFINITIVE = "CONDAMNATION_DEFINITIVE"
    RELAXE = "RELAXE"
    ACQUITTEMENT = "ACQUITTEMENT"
    NON_LIEU = "NON_LIEU"
    PRESCRIPTION = "PRESCRIPTION"
    CLASSEMENT_SANS_SUITE = "CLASSEMENT_SANS_SUITE"


class AffairCategory(str, Enum):
    """Offence category of an affair."""
    CORRUPTION = "CORRUPTION"
    CORRUPTION_PASSIVE = "CORRUPTION_PASSIVE"
    TRAFIC_INFLUENCE = "TRAFIC_INFLUENCE"
    PRISE_ILLEGALE_INTERETS = "PRISE_ILLEGALE_INTERETS"
    FAVORITISME = "FAVORITISME"
    DETOURNEMENT_FONDS_PUBLICS = "DETOURNEMENT_FONDS_PUBLICS"
    FRAUDE_FISCALE = "FRAUDE_FISCALE"
    BLANCHIMENT = "BLANCHIMENT"
    ABUS_BIENS_SOCIAUX = "ABUS_BIENS_SOCIAUX"
    ABUS_CONFIANCE = "ABUS_CONFIANCE"
    EMPLOI_FICTIF = "EMPLOI_FICTIF"
    FINANCEMENT_ILLEGAL_CAMPAGNE = "FINANCEMENT_ILLEGAL_CAMPAGNE"
    FINANCEMENT_ILLEGAL_PARTI = "FINANCEMENT_ILLEGAL_PARTI"
    HARCELEMENT_MORAL = "HARCELEMENT_MORAL"
    HARCELEMENT_SEXUEL = "HARCELEMENT_SEXUEL"
    AGRESSION_SEXUELLE = "AGRESSION_SEXUELLE"
    VIOLENCE = "VIOLENCE"
    MENACE = "MENACE"
    DIFFAMATION = "DIFFAMATION"
    INJURE = "INJURE"
    INCITATION_HAINE = "INCITATION_HAINE"
    FAUX_ET_USAGE_FAUX = "FAUX_ET_USAGE_FAUX"
    RECEL = "RECEL"
    CONFLIT_INTERETS = "CONFLIT_INTERETS"
    AUTRE = "AUTRE"


class Involvement(str, Enum):
    """Role the politician plays in the affair."""
    DIRECT = "DIRECT"
    INDIRECT = "INDIRECT"
    MENTIONED_ONLY = "MENTIONED_ONLY"
    VICTIM = "VICTIM"
    PLAINTIFF = "PLAINTIFF"


class PublicationStatus(str, Enum):
    """Editorial state of an affair record."""
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    REJECTED = "REJECTED"
    ARCHIVED = "ARCHIVED"
    EXCLUDED = "EXCLUDED"


class AffairSource(BaseModel):
    """Citation attached to an affair."""

    model_config = ConfigDict(from_attributes=True)

    url: str = Field(description="Source URL")
    title: str = Field(default="", description="Article or decision title")
    publisher: str = Field(default="", description="Publisher name (e.g., 'Le Monde')")


class AffairRecord(BaseModel):
    """
    Affair as compared by the duplicate detector.

    Built from ``AffairModel`` rows with their sources loaded.
    """

    model_config = ConfigDict(from_attributes=True)

    # MARK: - Identity
    id: int = Field(description="Affair database ID")
    title: str = Field(description="Affair title")
    description: str = Field(default="", description="Free-text summary")

    # MARK: - Classification
    status: AffairStatus
    category: AffairCategory
    involvement: Involvement = Field(default=Involvement.DIRECT)
    publication_status: PublicationStatus = Field(default=PublicationStatus.PUBLISHED)

    # MARK: - Legal references
    ecli: Optional[str] = Field(
        default=None,
        description="European Case Law Identifier (e.g., 'ECLI:FR:CCASS:2020:CR00123')"
    )
    pourvoi_number: Optional[str] = Field(
        default=None,
        description="Cour de cassation appeal filing number (e.g., '19-81.234')"
    )
    case_numbers: List[str] = Field(
        default_factory=list,
        description="Court case numbers referencing this affair"
    )

    # MARK: - Key dates
    facts_date: Optional[date] = None
    start_date: Optional[date] = None
    verdict_date: Optional[date] = None

    sources: List[AffairSource] = Field(default_factory=list)

    @property
    def reference_date(self) -> Optional[date]:
        """First available of facts, start and verdict dates."""
        return self.facts_date or self.start_date or self.verdict_date

    @property
    def source_urls(self) -> set[str]:
        return {source.url for source in self.sources}


class DuplicateAffair(BaseModel):
    """Affair summary shown in the admin duplicate review screen."""

    id: int
    title: str
    status: AffairStatus
    category: AffairCategory
    involvement: Involvement
    publication_status: PublicationStatus
    ecli: Optional[str] = None
    pourvoi_number: Optional[str] = None
    facts_date: Optional[date] = None
    start_date: Optional[date] = None
    verdict_date: Optional[date] = None
    source_count: int = 0
    sources: List[AffairSource] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: AffairRecord) -> "DuplicateAffair":
        return cls(
            id=record.id,
            title=record.title,
            status=record.status,
            category=record.category,
            involvement=record.involvement,
            publication_status=record.publication_status,
            ecli=record.ecli,
            pourvoi_number=record.pourvoi_number,
            facts_date=record.facts_date,
            start_date=record.start_date,
            verdict_date=record.verdict_date,
            source_count=len(record.sources),
            sources=list(record.sources),
        )


class DuplicateGroup(BaseModel):
    """Pair of affairs likely describing the same case."""

    score: int = Field(ge=0, le=100, description="Similarity score")
    reasons: List[str] = Field(min_length=1, description="Why the pair was flagged")
    affairs: List[DuplicateAffair] = Field(min_length=2, max_length=2)


class MergeResult(BaseModel):
    """Outcome of merging a secondary affair into a primary one."""

    primary_id: int
    deleted_id: int
    sources_moved: int = 0
    events_moved: int = 0
    press_links_moved: int = 0
    identifiers_merged: List[str] = Field(default_factory=list)
