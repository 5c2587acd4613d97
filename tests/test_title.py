from voiceplan.nlp.title import clean_title


def test_strips_leading_filler():
    assert clean_title("remind me to call mom") == "Call mom"
    assert clean_title("Tengo que enviar el informe a Pedro") == "Enviar el informe a Pedro"
    assert clean_title("  I need to renew the passport ") == "Renew the passport"


def test_only_true_prefix_is_stripped():
    assert clean_title("Please add milk") == "Please add milk"


def test_only_first_prefix_is_stripped():
    assert clean_title("need to add milk") == "Add milk"
    # a second pass strips the filler the first pass exposed
    assert clean_title("Add milk") == "Milk"


def test_keeps_original_casing():
    assert clean_title("llamar a Juan en la oficina de NASA") == "Llamar a Juan en la oficina de NASA"


def test_removes_date_time_and_priority_cues():
    assert clean_title("comprar pan para mañana a las 5:30") == "Comprar pan"
    assert clean_title("Cena con Ana el viernes a las 9 de la noche") == "Cena con Ana"
    assert clean_title("revisar facturas, urgente") == "Revisar facturas"


def test_removes_time_after_any_preposition():
    assert clean_title("entregar el informe para las 5") == "Entregar el informe"
    assert clean_title("trabajar hasta las 6") == "Trabajar"


def test_falls_back_when_only_cues_remain():
    assert clean_title("mañana urgente") == "Mañana urgente"


def test_idempotent():
    for sentence in [
        "recordar comprar leche mañana a las 3 urgente",
        "remind me to call mom",
        "mañana urgente",
        "reunión con Juan el lunes importante",
        "¿qué tal si probamos otra idea?",
    ]:
        once = clean_title(sentence)
        assert clean_title(once) == once
