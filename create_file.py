import os


def render_header(title, description, date, size):
    lines = [
        f"# {title}",
        f"# Last Updated: {date.isoformat()}",
        f"# Size: {size}",
        "#",
    ]
    lines += [f"# {line}".rstrip() for line in description]
    return lines


def render_ruleset(title, description, date, domains):
    """Surge domainset: every entry is a suffix rule, written as ".domain"."""
    return render_header(title, description, date, len(domains)) + [f".{d}" for d in domains]


def render_clash(title, description, date, domains):
    return render_header(title, description, date, len(domains)) + [f"+.{d}" for d in domains]


def same_content(old_lines, new_lines):
    """Compare two files ignoring comment lines, which carry the timestamp."""
    old = [line for line in old_lines if not line.startswith("#")]
    new = [line for line in new_lines if not line.startswith("#")]
    return old == new


def compare_and_write_file(lines, path):
    """Write `lines` to `path` unless the content there is already the same."""
    if os.path.exists(path):
        with open(path, encoding="utf-8") as f:
            if same_content(f.read().splitlines(), lines):
                print(f"Same content, skip writing: {path}")
                return False

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))
        f.write("\n")
    print(f"Writing {len(lines)} lines to {path}")
    return True


def create_ruleset(title, description, date, domains, surge_path, clash_path):
    return (
        compare_and_write_file(render_ruleset(title, description, date, domains), surge_path),
        compare_and_write_file(render_clash(title, description, date, domains), clash_path),
    )
