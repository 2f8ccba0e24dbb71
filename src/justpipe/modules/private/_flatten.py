import ast


def _flatten(node: ast.expr) -> list[ast.expr]:
    if isinstance(node, ast.List):
        return list(node.elts)
    return [node]
