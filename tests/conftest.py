from pathlib import Path

import pytest


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """A minimal pair of templates exercising every binding key."""
    d = tmp_path / "templates"
    d.mkdir()
    (d / "signal_class_template.h.j2").write_text(
        "template< {{ template_signature }} >\n"
        "class Signal{{ arg_count }}< {{ arg_type_list }} > { void Emit( {{ arg_signature }} ) { d( {{ arg_list }} ); } };\n",
        encoding="utf-8",
    )
    (d / "header_template.h.j2").write_text(
        "\n"
        "// header\n"
        "{% for signal_class in signal_classes %}\n"
        "{{ signal_class }}\n"
        "{% endfor %}\n"
        "// end\n"
        "\n",
        encoding="utf-8",
    )
    return d
