from patternworks.prototype import NPC


def test_setup_message(capsys):
    NPC("Alien", 30, 5, 2)
    assert capsys.readouterr().out == "Setting up template NPC 'Alien'\n"


def test_clone_copies_fields():
    alien = NPC("Alien", 30, 5, 2)
    copied = alien.clone()
    assert copied is not alien
    assert (copied.name, copied.health, copied.attack, copied.defense) == ("Alien", 30, 5, 2)


def test_clone_message_skips_setup(capsys):
    alien = NPC("Alien", 30, 5, 2)
    capsys.readouterr()
    alien.clone()
    assert capsys.readouterr().out == "Cloning NPC 'Alien'\n"


def test_clone_is_independent():
    alien = NPC("Alien", 30, 5, 2)
    powerful = alien.clone()
    powerful.name = "Powerful Alien"
    powerful.health = 50
    assert alien.name == "Alien"
    assert alien.health == 30
    assert powerful.describe() == "NPC Powerful Alien [HP=50 ATK=5 DEF=2]"


def test_describe_prints_and_returns(capsys):
    alien = NPC("Alien", 30, 5, 2)
    capsys.readouterr()
    text = alien.describe()
    assert text == "NPC Alien [HP=30 ATK=5 DEF=2]"
    assert capsys.readouterr().out == text + "\n"