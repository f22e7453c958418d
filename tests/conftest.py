"""Shared test fixtures for deadref tests."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def write_project(tmp_path):
    """Build a project tree under tmp_path from a {relative path: text} mapping."""

    def _write(files: dict, package_json: dict = None) -> Path:
        for rel, text in files.items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        if package_json is not None:
            (tmp_path / "package.json").write_text(json.dumps(package_json), encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def sample_project(write_project):
    """Small React project with one dead component and one dead stylesheet."""
    return write_project(
        {
            "src/index.tsx": (
                "import React from 'react';\n"
                "import App from './App';\n"
                "import '@/styles/main.less';\n"
            ),
            "src/App.tsx": (
                "import { Button } from '@/components/Button';\n"
                "const Lazy = React.lazy(() => import('./pages/Lazy'));\n"
                "export default function App() {\n"
                "  return <img src=\"./assets/logo.png\" />;\n"
                "}\n"
            ),
            "src/components/Button/index.tsx": "export const Button = () => null;\n",
            "src/components/Dead.tsx": "export const Dead = 1;\n",
            "src/pages/Lazy.tsx": "export default function Lazy() { return null; }\n",
            "src/styles/main.less": "@import 'common.less';\n.a { background: url(../assets/bg.png); }\n",
            "src/styles/common.less": ".b { color: red; }\n",
            "src/styles/unused.css": ".c { color: blue; }\n",
        },
        package_json={
            "dependencies": {"react": "^18.0.0", "lodash": "^4.0.0"},
            "devDependencies": {"@types/react": "^18.0.0"},
        },
    )
