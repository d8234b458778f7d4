import sys

from walker.ast_parser import parse_php_file
from walker.ast_walker import walk_ast


def _parent_chain(node, limit=3):
    chain = []
    cur = node.get("parent")
    while cur is not None and len(chain) < limit:
        chain.append(str(cur.get("kind")))
        cur = cur.get("parent")
    return " -> ".join(chain)


def dump_lines(statements, line_start=None, line_end=None):
    nodes = []
    for statement in statements:
        walk_ast(statement, nodes)

    lines = []
    for n in nodes:
        line = n.get("line")
        if line_start is not None and line_end is not None:
            if not line or line < line_start or line > line_end:
                continue

        indent = "  " * n.get("depth", 0)
        parents = _parent_chain(n)
        suffix = f" parents={parents}" if parents else ""
        lines.append(f"{indent}{n.get('kind')} line={line}{suffix}")
    return lines


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage: python -m walker.debug_dump <file> [line_start] [line_end]")
        return 1

    filename = argv[0]
    line_start = int(argv[1]) if len(argv) > 1 else None
    line_end = int(argv[2]) if len(argv) > 2 else None

    for text in dump_lines(parse_php_file(filename), line_start, line_end):
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
