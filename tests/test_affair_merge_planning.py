from transparence.db.models import AffairModel
from transparence.services.affair_admin_service import plan_identifier_merge


def _make_affair_model(**fields) -> AffairModel:
    data = {
        "id": 1,
        "politician_id": 1,
        "title": "Affaire",
        "status": "INSTRUCTION",
        "category": "AUTRE",
        "case_numbers": [],
    }
    data.update(fields)
    return AffairModel(**data)


def test_plan_fills_only_missing_identifiers() -> None:
    primary = _make_affair_model(ecli="ECLI:FR:A", court=None, case_numbers=[])
    secondary = _make_affair_model(
        id=2,
        ecli="ECLI:FR:B",
        pourvoi_number="20-80.001",
        court="Tribunal correctionnel de Paris",
        case_numbers=["20/1"],
    )

    updates = plan_identifier_merge(primary, secondary)

    assert updates == {
        "pourvoi_number": "20-80.001",
        "court": "Tribunal correctionnel de Paris",
        "case_numbers": ["20/1"],
    }


def test_plan_is_empty_when_primary_is_complete() -> None:
    primary = _make_affair_model(
        ecli="ECLI:FR:A",
        pourvoi_number="1",
        court="c",
        chamber="ch",
        case_number="n",
        case_numbers=["x"],
    )
    secondary = _make_affair_model(id=2, ecli="ECLI:FR:B", case_numbers=["y"])

    assert plan_identifier_merge(primary, secondary) == {}
