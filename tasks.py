# type: ignore
import os

from invoke import task


@task
def venv(ctx):
    """Create the development environment with uv."""
    ctx.run("uv sync --all-extras")


@task
def clean(ctx):
    """
    Remove build artifacts and caches that are not under version control.
    Shows what would be removed and asks before deleting anything.
    """
    ctx.run("git clean -nfdx")

    response = (
        input("Are you sure you want to remove all untracked files? (y/n) [n]: ")
        .strip()
        .lower()
    )
    if response == "y":
        ctx.run("git clean -fdx")


@task
def lint(ctx):
    """Run ruff and mypy over the package."""
    ctx.run("ruff check src tests", pty=True)
    ctx.run("ruff format --check src tests", pty=True)
    ctx.run("mypy src", pty=True)


@task
def test(ctx):
    """Run the test suite with coverage."""
    ctx.run("pytest --cov=arpscout --cov-report=term-missing", pty=True)


@task
def scan(ctx, redact=False):
    """Scan the local ARP cache with debug logging."""
    flags = " --redact" if redact else ""
    ctx.run(f"arpscout scan{flags}", env={"LOGLEVEL": "DEBUG"}, pty=True)


@task
def build_package(ctx):
    """Build sdist and wheel with uv."""
    ctx.run("rm -rf dist")
    ctx.run("uv build")


@task
def release(ctx):
    """Build the package and publish it to PyPI."""
    token = os.getenv("PYPI_TOKEN")
    if not token:
        raise ValueError("PYPI_TOKEN environment variable is not set")

    ctx.run("invoke build-package")
    ctx.run(f"uv publish --token {token}")
