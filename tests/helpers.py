"""Shared helpers for driving a game session in tests."""


def type_answer(session, value):
    for char in str(value):
        session.append_digit(int(char))
