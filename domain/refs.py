BRANCH_REF_PREFIX = "refs/heads/"
FALLBACK_BASE_BRANCH = "main"


def resolve_base_branch(ref: str | None) -> str:
    # Best effort: GITHUB_REF names the branch the workflow ran on, which is not
    # necessarily the repository's default branch.
    if not ref:
        return FALLBACK_BASE_BRANCH
    branch = ref.removeprefix(BRANCH_REF_PREFIX)
    return branch or FALLBACK_BASE_BRANCH


def split_repository_slug(slug: str | None) -> tuple[str, str]:
    """Split an ``owner/repo`` slug such as the one in ``GITHUB_REPOSITORY``."""
    owner, separator, repo = (slug or "").partition("/")
    if not separator or not owner or not repo or "/" in repo:
        raise ValueError(
            f"GITHUB_REPOSITORY must look like 'owner/repo', got {slug!r}"
        )
    return owner, repo
