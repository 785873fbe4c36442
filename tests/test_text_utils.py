from transparence.utils.text import normalize_text, strip_accents, tokenize


def test_strip_accents_removes_combining_marks() -> None:
    assert strip_accents("Détournement préjugé garde à vue") == "Detournement prejuge garde a vue"


def test_normalize_text_lowercases_and_collapses_whitespace() -> None:
    assert normalize_text("  MISE   EN\tEXAMEN\n") == "mise en examen"
    assert normalize_text(None) == ""


def test_tokenize_drops_punctuation_short_words_and_stopwords() -> None:
    tokens = tokenize("L'affaire des assistants parlementaires du FN", frozenset({"des", "du"}))
    assert tokens == ["affaire", "assistants", "parlementaires", "fn"]


def test_normalize_text_folds_typographic_apostrophes() -> None:
    assert normalize_text("Cour d’Appel") == "cour d'appel"
    assert normalize_text("l‘élu dʼici") == "l'elu d'ici"
