def format_tree(tree, skip_terminals=True):
    lines = []
    lines.append('---------- Tree ----------')
    lines.append(tree.get_tree_string())
    lines.append('---------- Terminals ----------')
    lines.append(', '.join(tree.get_terminals()))
    lines.append('---------- Dominates Relations ----------')
    lines.append('Number of Dominance relations: %d' % len(tree.get_dominators()))
    lines.append('---------- C-Command Relations ----------')
    for x in sorted(tree.get_ccommanders()):
        lines.append(format_ccommands(tree, x))
    lines.append('---------- CFG ----------')
    lines.append(tree.get_cfg(skip_terminals))
    return '\n'.join(lines)


def format_ccommands(tree, x):
    targets = ', '.join(tree.get_symbol_for_node(y, True)
                        for y in sorted(tree.get_ccommended(x)))
    return '%s c-commands: %s' % (tree.get_symbol_for_node(x, True), targets)
