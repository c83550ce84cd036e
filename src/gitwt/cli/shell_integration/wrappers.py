"""Shell wrapper functions printed by `gitwt shell-init`.

A subprocess cannot change its parent shell's directory. The wrappers run
gitwt in script mode, capture the script path it prints on stdout, and source
that script in the calling shell.
"""

from string import Template

SUPPORTED_SHELLS = ("bash", "zsh", "fish")

_POSIX_NAVIGATING_FUNCTION = Template(
    """\
$function_name() {
    local script_path exit_status
    script_path="$$(command gitwt $subcommand --script "$$@")"
    exit_status=$$?
    if [ $$exit_status -ne 0 ]; then
        return $$exit_status
    fi
    if [ -n "$$script_path" ] && [ -f "$$script_path" ]; then
        . "$$script_path"
        rm -f "$$script_path"
    fi
}
"""
)

_POSIX_LIST_FUNCTION = """\
wt-list() {
    command gitwt list "$@"
}
"""

_FISH_NAVIGATING_FUNCTION = Template(
    """\
function $function_name
    set -l script_path (command gitwt $subcommand --script $$argv)
    set -l exit_status $$status
    if test $$exit_status -ne 0
        return $$exit_status
    end
    if test -n "$$script_path"; and test -f "$$script_path"
        source "$$script_path"
        rm -f "$$script_path"
    end
end
"""
)

_FISH_LIST_FUNCTION = """\
function wt-list
    command gitwt list $argv
end
"""


def render_shell_functions(shell: str) -> str:
    """Render the wt, wt-list and wt-remove functions for `shell`.

    Raises:
        ValueError: If `shell` is not one of SUPPORTED_SHELLS
    """
    match shell:
        case "bash" | "zsh":
            navigating, list_function = _POSIX_NAVIGATING_FUNCTION, _POSIX_LIST_FUNCTION
        case "fish":
            navigating, list_function = _FISH_NAVIGATING_FUNCTION, _FISH_LIST_FUNCTION
        case _:
            raise ValueError(
                f"Unsupported shell: {shell} (supported: {', '.join(SUPPORTED_SHELLS)})"
            )

    header = f"# gitwt shell integration for {shell}\n"
    parts = [
        header,
        navigating.substitute(function_name="wt", subcommand="create"),
        list_function,
        navigating.substitute(function_name="wt-remove", subcommand="remove"),
    ]
    return "\n".join(parts)
