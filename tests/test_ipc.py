from osalgos.ipc import DEFAULT_MESSAGE, DEFAULT_REPLY, exchange_messages, main


def test_default_exchange():
    assert exchange_messages() == (DEFAULT_MESSAGE, DEFAULT_REPLY)


def test_custom_messages_round_trip():
    child, parent = exchange_messages("ping", "pong")
    assert child == "ping"
    assert parent == "pong"


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == (
        "Child received: Hello from parent!\n"
        "Parent received: Hi Parent, I got your message!\n"
    )