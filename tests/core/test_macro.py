from src.core.commands import CommandDispatcher, ResultKind, run_macro


def test_macro_entries_are_independent(dispatcher, make_command):
    results = run_macro(dispatcher, [make_command("A"), make_command("B"), make_command("C")])

    assert [r.command_name for r in results] == ["A", "B", "C"]
    assert dispatcher.count() == 3
    assert [e.name for e in dispatcher.history()] == ["C", "B", "A"]

def test_macro_undo_takes_one_undo_per_command(dispatcher, make_command):
    dispatcher.execute(make_command("before"))
    run_macro(dispatcher, [make_command("A"), make_command("B")])

    dispatcher.undo_one()
    assert dispatcher.undo_name == "A"

    outcome = dispatcher.undo_many(1)
    assert outcome.undone == 1
    assert dispatcher.undo_name == "before"

def test_macro_continues_after_failure(dispatcher, make_command):
    results = run_macro(dispatcher, [
        make_command("A"),
        make_command("broken", fail_execute=True),
        make_command("C"),
    ])

    assert [r.kind for r in results] == [ResultKind.OK, ResultKind.EXECUTE_FAILED, ResultKind.OK]
    assert [e.name for e in dispatcher.history()] == ["C", "A"]

def test_macro_respects_capacity(make_command):
    dispatcher = CommandDispatcher(capacity=2)
    run_macro(dispatcher, [make_command(label) for label in "ABCD"])

    assert [e.name for e in dispatcher.history()] == ["D", "C"]
