from repo_kickoff.create_repo import build_create_command
from repo_kickoff.remote import configure_origin, publish

URL = "https://github.com/alice/demo.git"


def test_adds_origin_when_absent(shell):
    shell.outputs[("git", "remote")] = ""
    configure_origin(URL)

    assert shell.commands == [
        ["git", "remote"],
        ["git", "remote", "add", "origin", URL],
    ]


def test_updates_origin_when_present(shell):
    shell.outputs[("git", "remote")] = "upstream\norigin\n"
    configure_origin(URL)

    assert shell.commands == [
        ["git", "remote"],
        ["git", "remote", "set-url", "origin", URL],
    ]


def test_similar_remote_name_is_not_origin(shell):
    shell.outputs[("git", "remote")] = "origin-old\n"
    configure_origin(URL)

    assert shell.commands[-1] == ["git", "remote", "add", "origin", URL]


def test_publish(shell):
    publish("main")

    assert shell.commands == [
        ["git", "branch", "-M", "main"],
        ["git", "push", "-u", "origin", "main"],
    ]


def test_create_command_private_without_description():
    assert build_create_command("demo") == ["repo", "create", "demo", "--private"]


def test_create_command_public_with_description():
    assert build_create_command("demo", public=True, description="A demo") == [
        "repo", "create", "demo", "--public", "--description", "A demo",
    ]
