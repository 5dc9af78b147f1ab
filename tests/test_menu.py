from bus_reservation.menu import MenuSession


def _run(catalog, prompt):
    output = []
    MenuSession(catalog, prompt=prompt, write=output.append).run()
    return "\n".join(output)


def test_exit_choice_ends_session(default_catalog, scripted_input):
    text = _run(default_catalog, scripted_input("5"))

    assert "1. View Buses" in text
    assert text.endswith("Exiting...")


def test_end_of_input_ends_session(default_catalog, scripted_input):
    text = _run(default_catalog, scripted_input())

    assert text.endswith("Exiting...")


def test_invalid_and_non_numeric_choices(default_catalog, scripted_input):
    text = _run(default_catalog, scripted_input("9", "abc", "5"))

    assert "Invalid choice! Please try again." in text
    assert "Please enter a whole number." in text


def test_view_buses(default_catalog, scripted_input):
    text = _run(default_catalog, scripted_input("1", "5"))

    assert "Available Buses:" in text
    for bus_number in ("123A", "456B", "789C", "012D"):
        assert bus_number in text


def test_search_buses(default_catalog, scripted_input):
    text = _run(default_catalog, scripted_input("2", "  boston", "NEW YORK ", "5"))

    assert "Searching for buses from   boston to NEW YORK :" in text
    assert "123A" in text.split("Searching")[1]
    assert "012D" in text.split("Searching")[1]
    assert "456B" not in text.split("Searching")[1]


def test_search_without_match(default_catalog, scripted_input):
    text = _run(default_catalog, scripted_input("2", "Boston", "Chicago", "5"))

    assert "No buses found for the given source and destination." in text


def test_book_seats(default_catalog, scripted_input):
    text = _run(default_catalog, scripted_input("3", "1", "3", "1 2 3", "5"))

    assert "Seat Status for Bus 123A:" in text
    assert "Booking successful! Total cost: $90.00" in text
    assert default_catalog.get(1).count_booked() == 3


def test_book_seats_numbers_over_several_lines(default_catalog, scripted_input):
    _run(default_catalog, scripted_input("3", "2", "2", "4", "5", "5"))

    assert [seat for seat, booked in default_catalog.get(2).seat_status() if booked] == [4, 5]


def test_book_seats_re_prompts_for_rejected_seats(default_catalog, scripted_input):
    default_catalog.get(1).book_seats([2])

    text = _run(default_catalog, scripted_input("3", "1", "3", "2 0 7", "8 9", "5"))

    assert "Seat number 2 is invalid or already booked!" in text
    assert "Seat number 0 is invalid or already booked!" in text
    assert "Enter 2 replacement seat number(s):" in text
    assert "Booking successful! Total cost: $90.00" in text
    booked = [seat for seat, is_booked in default_catalog.get(1).seat_status() if is_booked]
    assert booked == [2, 7, 8, 9]


def test_book_seats_re_prompts_for_repeated_seat(default_catalog, scripted_input):
    text = _run(default_catalog, scripted_input("3", "3", "2", "4 4", "6", "5"))

    assert "Seat number 4 was requested more than once!" in text
    assert default_catalog.get(3).count_booked() == 2


def test_book_seats_invalid_index_aborts(default_catalog, scripted_input):
    text = _run(default_catalog, scripted_input("3", "7", "5"))

    assert "Invalid bus index!" in text
    assert all(trip.count_booked() == 0 for trip in default_catalog)


def test_book_seats_invalid_count_aborts(default_catalog, scripted_input):
    text = _run(default_catalog, scripted_input("3", "3", "31", "5"))

    assert "Invalid number of seats!" in text
    assert default_catalog.get(3).count_booked() == 0


def test_view_reservations(default_catalog, scripted_input):
    default_catalog.get(4).book_seats([1])

    text = _run(default_catalog, scripted_input("4", "4", "5"))

    assert "Bus Number: 012D, Destination: New York, Source City: Boston" in text
    assert "Booked Seats: 1, Ticket Price: $28.00" in text
    assert "Seat Status for Bus 012D:" in text


def test_view_reservations_invalid_index(default_catalog, scripted_input):
    text = _run(default_catalog, scripted_input("4", "0", "5"))

    assert "Invalid bus index!" in text


def test_book_more_seats_than_are_free_aborts(empty_catalog, scripted_input):
    empty_catalog.add("S2", "B", "A", 2, 10.0)
    empty_catalog.get(1).book_seats([1])

    text = _run(empty_catalog, scripted_input("3", "1", "2", "1", "5"))

    assert "Invalid number of seats!" in text
    assert "replacement seat number" not in text
    assert text.endswith("Exiting...")
    assert empty_catalog.get(1).count_booked() == 1


def test_book_seats_reports_ignored_extra_numbers(empty_catalog, scripted_input):
    empty_catalog.add("S3", "B", "A", 4, 5.0)

    text = _run(empty_catalog, scripted_input("3", "1", "2", "1 2 3", "5"))

    assert "Ignoring extra seat numbers: 3" in text
    assert "Booking successful! Total cost: $10.00" in text
    assert [seat for seat, booked in empty_catalog.get(1).seat_status() if booked] == [1, 2]
