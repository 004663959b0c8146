"""Project scaffolding written next to the generated site in an export archive."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from jinja2 import BaseLoader, Environment

_WHITESPACE_RE = re.compile(r"\s+")

README_TEMPLATE = """# {{ project_name }}

Built with Pagecraft, a static site generator for component trees.

## Getting Started

### Option 1: Simple HTTP Server

```bash
# Python 3
python -m http.server 8000

# Node.js
npx serve
```

### Option 2: Vite Dev Server

```bash
npm install
npm run dev
```

## Deployment

{% for target in deploy_targets %}
### {{ target.title }}

{{ target.instructions }}

{% endfor %}
## License

MIT
"""

GITIGNORE_ENTRIES = ("node_modules", "dist", ".DS_Store", "*.log", ".env", ".vscode", ".idea")

_environment = Environment(
    loader=BaseLoader(),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


@dataclass(frozen=True)
class ScaffoldFile:
    """One file of the scaffolding: archive path and text content."""

    path: str
    content: str


@dataclass(frozen=True)
class DeployTarget:
    """A hosting platform and the descriptor file it needs, if any."""

    name: str
    title: str
    instructions: str
    render_config: Optional[Callable[[], ScaffoldFile]] = None

    def config_file(self) -> Optional[ScaffoldFile]:
        return self.render_config() if self.render_config else None


def project_slug(project_name: str) -> str:
    """Lower-case the name and turn whitespace runs into hyphens."""
    return _WHITESPACE_RE.sub("-", project_name.lower())


def render_package_json(project_name: str) -> ScaffoldFile:
    manifest = {
        "name": project_slug(project_name),
        "version": "1.0.0",
        "description": f"{project_name} - Built with Pagecraft",
        "scripts": {
            "dev": "vite",
            "build": "vite build",
            "preview": "vite preview",
            "serve": "python -m http.server 8000",
        },
        "devDependencies": {"vite": "^5.0.0"},
    }
    return ScaffoldFile("package.json", json.dumps(manifest, indent=2))


def render_readme(project_name: str) -> ScaffoldFile:
    template = _environment.from_string(README_TEMPLATE)
    content = template.render(project_name=project_name, deploy_targets=DEPLOY_TARGETS.values())
    return ScaffoldFile("README.md", content)


def render_gitignore() -> ScaffoldFile:
    return ScaffoldFile(".gitignore", "\n".join(GITIGNORE_ENTRIES))


def render_vercel_config() -> ScaffoldFile:
    config = {
        "version": 2,
        "builds": [{"src": "index.html", "use": "@vercel/static"}],
        "routes": [{"src": "/(.*)", "dest": "/index.html"}],
    }
    return ScaffoldFile("vercel.json", json.dumps(config, indent=2))


def render_netlify_config() -> ScaffoldFile:
    content = (
        "[build]\n"
        '  publish = "."\n'
        "\n"
        "[[redirects]]\n"
        '  from = "/*"\n'
        '  to = "/index.html"\n'
        "  status = 200"
    )
    return ScaffoldFile("netlify.toml", content)


DEPLOY_TARGETS: Dict[str, DeployTarget] = {
    "vercel": DeployTarget(
        name="vercel",
        title="Vercel",
        instructions="```bash\nnpx vercel\n```",
        render_config=render_vercel_config,
    ),
    "netlify": DeployTarget(
        name="netlify",
        title="Netlify",
        instructions="```bash\nnpx netlify deploy\n```",
        render_config=render_netlify_config,
    ),
    "static": DeployTarget(
        name="static",
        title="GitHub Pages",
        instructions="Push to a GitHub repository and enable Pages in settings.",
    ),
}


def project_files(project_name: str, platform: Optional[str] = None) -> List[ScaffoldFile]:
    """Manifest, readme, ignore file and the descriptor of ``platform``."""
    files = [render_package_json(project_name), render_readme(project_name), render_gitignore()]
    target = DEPLOY_TARGETS.get(platform) if platform else None
    if target is not None:
        config = target.config_file()
        if config is not None:
            files.append(config)
    return files
