"""Backlog project URL helpers"""
import re
from urllib.parse import urlsplit

_API_PREFIX = "/api/v2"
_PROJECTS_RE = re.compile(r"^(?P<prefix>.*?)/projects/(?P<name>[^/]+)$")


def normalize_base_url(raw: str) -> str:
    """Turn a user-entered project URL into https://<host>/api/v2/projects/<name>.

    Accepts "host/projects/NAME", "https://host/projects/NAME" and the
    already-normalized form.
    """
    url = (raw or "").strip()
    if not url:
        raise ValueError("Empty Backlog project URL")
    if "://" not in url:
        url = f"https://{url}"

    parts = urlsplit(url)
    if not parts.netloc:
        raise ValueError(f"Invalid Backlog project URL: {raw}")

    path = parts.path.rstrip("/")
    m = _PROJECTS_RE.match(path)
    if not m:
        raise ValueError(f"Backlog project URL must end in /projects/<name>: {raw}")

    prefix = m.group("prefix")
    if not prefix.endswith(_API_PREFIX):
        prefix = f"{prefix}{_API_PREFIX}"
    return f"{parts.scheme}://{parts.netloc}{prefix}/projects/{m.group('name')}"


def root_url(base_url: str) -> str:
    """Strip the trailing /projects/<name> to get the API root for item endpoints"""
    base = base_url.rstrip("/")
    idx = base.rfind("/projects/")
    if idx == -1:
        return base
    return base[:idx]


def project_name(base_url: str) -> str:
    """Last path segment of the project URL"""
    return urlsplit(base_url).path.rstrip("/").rsplit("/", 1)[-1]


def issue_url(base_url: str, issue_key: str) -> str:
    return f"{root_url(base_url)}/issues/{issue_key}.json"
