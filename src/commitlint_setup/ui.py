# ──────────────────────────────────────────────
# ANSI helpers
# ──────────────────────────────────────────────
BOLD = "\033[1m"
DIM = "\033[2m"
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
MAGENTA = "\033[95m"
RESET = "\033[0m"
RULE = "━" * 48


def styled(text: str, *codes: str) -> str:
    return "".join(codes) + text + RESET


def print_banner() -> None:
    print()
    print(styled(RULE, CYAN))
    print(styled("commitlint setup for Git (Windows)", CYAN, BOLD))
    print(styled(RULE, CYAN))
    print("  Installs commitlint and a global commit-msg hook that checks")
    print("  every commit message against Conventional Commits.")
    print()


def print_step(result) -> None:
    mark = styled("✓", GREEN, BOLD) if result.ok else styled("!", YELLOW, BOLD)
    print(f"  {mark} {result.name}")
    for msg in result.messages:
        print(styled(f"      {msg}", DIM if result.ok else YELLOW))


def print_error(message: str) -> None:
    print(styled("Error: ", RED, BOLD) + message)


def print_summary(summary) -> None:
    # ── Files ──
    print()
    print(styled(RULE, GREEN))
    print(styled("FILES WRITTEN", GREEN, BOLD))
    print(styled(RULE, GREEN))
    for artifact in summary.artifacts:
        print(f"  {artifact.path}")
    print()
    if summary.hooks_path_set:
        print(f"  Global core.hooksPath : {styled(summary.hooks_path, BOLD)}")
    else:
        print(f"  Global core.hooksPath : {styled('not set (see warnings)', YELLOW, BOLD)}")

    # ── Warnings ──
    warnings = summary.warnings
    if warnings:
        print()
        print(styled(RULE, YELLOW))
        print(styled("FINISHED WITH WARNINGS", YELLOW, BOLD))
        print(styled(RULE, YELLOW))
        for step in warnings:
            print()
            print(f"  {styled(step.name, YELLOW, BOLD)}")
            for msg in step.messages:
                print(f"    {msg}")
        print()
        print("  The hook files are in place. Fix the items above and the")
        print("  hook starts working without running this setup again.")

    # ── Next steps ──
    print()
    print(styled(RULE, MAGENTA))
    print(styled("NEXT STEPS", MAGENTA, BOLD))
    print(styled(RULE, MAGENTA))
    print("  Open a new terminal so PATH changes take effect, then try:")
    print(styled('    git commit -m "update stuff"          ', DIM) + "-> rejected")
    print(styled('    git commit -m "feat: add login endpoint"', DIM) + " -> accepted")
    print()
