import pytest

from knightclue.cards import Card, Envelope


def test_card_default_name_is_empty():
    assert Card().name == ""


def test_card_str_is_its_name():
    assert str(Card("Lance")) == "Lance"


def test_cards_with_same_name_are_equal():
    assert Card("Zote") == Card("Zote")
    assert Card("Zote") != Card("Tiso")


def test_card_is_immutable():
    card = Card("Faux")
    with pytest.raises(AttributeError):
        card.name = "Massue"
    assert card.name == "Faux"


def test_empty_envelope_holds_empty_cards():
    envelope = Envelope()
    assert (envelope.room.name, envelope.enemy.name, envelope.weapon.name) == ("", "", "")


def test_envelope_matches_exact_triple():
    envelope = Envelope(room=Card("Dirtmouth"), enemy=Card("Hornet"), weapon=Card("Griffe"))
    assert envelope.matches("Griffe", "Dirtmouth", "Hornet") is True


@pytest.mark.parametrize(
    "weapon, room, enemy",
    [
        ("Lance", "Dirtmouth", "Hornet"),
        ("Griffe", "La Ruche", "Hornet"),
        ("Griffe", "Dirtmouth", "Knight"),
        ("Dirtmouth", "Griffe", "Hornet"),
    ],
)
def test_envelope_rejects_any_wrong_element(weapon, room, enemy):
    envelope = Envelope(room=Card("Dirtmouth"), enemy=Card("Hornet"), weapon=Card("Griffe"))
    assert envelope.matches(weapon, room, enemy) is False


def test_envelope_fields_can_be_replaced():
    envelope = Envelope()
    envelope.weapon = Card("Aiguille")
    envelope.room = Card("Vertchemin")
    envelope.enemy = Card("Cloth")
    assert envelope.matches("Aiguille", "Vertchemin", "Cloth")