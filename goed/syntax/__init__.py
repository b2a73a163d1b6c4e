"""Language syntax definitions, their registry and a syntax highlighter."""