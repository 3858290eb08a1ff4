from rosterdb.query import FilterCriteria, extract_vocabulary, filter_players

from tests.helpers import player


def _players():
    return [
        player(given="Jamal", family="Bhuyan", position="CDM, CM", year="1990", country="BAN"),
        player(given="Tariq", family="Kazi", position="CB", year="2000", country="FIN"),
        player(given="Hamza", family="Choudhury", position="CDM", year="1997", country="ENG"),
        player(given="Cuba", family="Mitchell", position="??", year="Unknown", country=""),
        player(given="Sheikh", family="Morsalin", position="ST,LW", year="2005", country="BAN"),
    ]


def test_empty_criteria_returns_input_in_order():
    players = _players()
    assert FilterCriteria().is_empty
    assert filter_players(players, FilterCriteria()) == players


def test_name_filter_is_case_insensitive_over_full_name():
    players = _players()

    names = [p.family_name for p in filter_players(players, FilterCriteria(name="JAMAL BHU"))]
    assert names == ["Bhuyan"]
    names = [p.family_name for p in filter_players(players, FilterCriteria(name="ch"))]
    assert names == ["Choudhury", "Mitchell"]


def test_position_filter_matches_exact_token():
    players = _players()

    result = filter_players(players, FilterCriteria(position="CM"))
    assert [p.family_name for p in result] == ["Bhuyan"]
    assert filter_players(players, FilterCriteria(position="C")) == []


def test_year_and_country_use_string_equality():
    players = _players()

    assert [p.given_name for p in filter_players(players, FilterCriteria(birth_year="2000"))] == ["Tariq"]
    assert filter_players(players, FilterCriteria(birth_year="2000.0")) == []
    assert [p.given_name for p in filter_players(players, FilterCriteria(country="BAN"))] == ["Jamal", "Sheikh"]


def test_constraints_are_anded():
    players = _players()
    criteria = FilterCriteria(name="a", position="CDM", country="BAN")

    result = filter_players(players, criteria)
    assert [p.given_name for p in result] == ["Jamal"]
    for p in result:
        assert criteria.position in p.position_list
        assert p.country == criteria.country


def test_vocabulary_excludes_sentinels_and_sorts():
    vocabulary = extract_vocabulary(_players())

    assert vocabulary.positions == ("CB", "CDM", "CM", "LW", "ST")
    assert vocabulary.birth_years == ("2005", "2000", "1997", "1990")
    assert vocabulary.countries == ("", "BAN", "ENG", "FIN")
    assert vocabulary.country_choices() == ("BAN", "ENG", "FIN")


def test_vocabulary_of_empty_dataset():
    vocabulary = extract_vocabulary([])
    assert vocabulary.positions == ()
    assert vocabulary.birth_years == ()
    assert vocabulary.countries == ()
