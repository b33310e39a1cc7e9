"""Shared fixtures for tfchanges integration tests.

Builds a real git repository in ``tmp_path`` with two branches so the
GitRevisionStore and both strategies run against actual git output.

Layout of ``main``::

    infra/main.tf      aws_instance.web, aws_db_instance.main
    infra/old.tf       aws_sqs_queue.legacy
    infra/network.tf   module.vpc
    docs/example.tf    aws_instance.sample   (outside infra/)

``feature`` branches from ``main`` and:

* edits the header line of aws_instance.web          -> modified
* edits only the body of aws_db_instance.main        -> not reported
* adds aws_elasticache_cluster.cache to main.tf      -> added
* deletes infra/old.tf                               -> removed
* adds infra/queue.tf with aws_sqs_queue.jobs        -> added
* edits docs/example.tf                              -> outside the directory
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")

MAIN_TF = """\
resource "aws_instance" "web" {
  ami           = "ami-123"
  instance_type = "t3.micro"
}

resource "aws_db_instance" "main" {
  engine         = "postgres"
  instance_class = "db.t3.micro"
}
"""

MAIN_TF_FEATURE = """\
resource "aws_instance" "web" { # public entry point
  ami           = "ami-123"
  instance_type = "t3.micro"
}

resource "aws_db_instance" "main" {
  engine         = "postgres"
  instance_class = "db.t3.large"
}

resource "aws_elasticache_cluster" "cache" {
  engine = "redis"
}
"""

OLD_TF = 'resource "aws_sqs_queue" "legacy" {\n}\n'
NETWORK_TF = 'module "vpc" {\n  source = "./modules/vpc"\n}\n'
QUEUE_TF = 'resource "aws_sqs_queue" "jobs" {\n}\n'
EXAMPLE_TF = 'resource "aws_instance" "sample" {\n}\n'

_GIT_IDENTITY = [
    "-c",
    "user.name=tfchanges tests",
    "-c",
    "user.email=tests@example.invalid",
    "-c",
    "commit.gpgsign=false",
]


def git(repo: Path, *args: str) -> str:
    """Run git in *repo* and return stdout, failing the test on error."""
    result = subprocess.run(
        ["git", "-C", str(repo), *_GIT_IDENTITY, *args],
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0, result.stderr
    return result.stdout


def write(repo: Path, rel: str, content: str) -> None:
    path = repo / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Repository with ``main`` and ``feature`` branches; ``feature`` checked out."""
    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "symbolic-ref", "HEAD", "refs/heads/main")

    write(repo, "infra/main.tf", MAIN_TF)
    write(repo, "infra/old.tf", OLD_TF)
    write(repo, "infra/network.tf", NETWORK_TF)
    write(repo, "docs/example.tf", EXAMPLE_TF)
    git(repo, "add", "-A")
    git(repo, "commit", "-q", "-m", "initial infrastructure")

    git(repo, "checkout", "-q", "-b", "feature")
    write(repo, "infra/main.tf", MAIN_TF_FEATURE)
    write(repo, "infra/queue.tf", QUEUE_TF)
    write(repo, "docs/example.tf", EXAMPLE_TF + "# edited\n")
    git(repo, "rm", "-q", "infra/old.tf")
    git(repo, "add", "-A")
    git(repo, "commit", "-q", "-m", "feature changes")
    return repo
