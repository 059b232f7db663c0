import lextok


def test_public_api():
    for name in lextok.__all__:
        assert hasattr(lextok, name)
    assert isinstance(lextok.__version__, str)


def test_readme_example():
    airline = []
    flight = []
    flight_code = lextok.at_least_one(
        lextok.upper_alphabet(), observer=lambda span: airline.append(str(span))
    ) & lextok.at_least_one(
        lextok.digit(), observer=lambda span: flight.append(int(str(span)))
    )

    cursor = lextok.Cursor("AA535")
    span = flight_code(cursor)
    assert str(span) == "AA535"
    assert airline == ["AA"]
    assert flight == [535]
