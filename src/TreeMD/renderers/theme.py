"""Default stylesheet for :func:`TreeMD.renderers.html.render_html` output."""

DEFAULT_TREE_THEME = """\
ul.tree,
ul.tree ul {
  list-style: none;
  margin: 0;
  padding-left: 1.25rem;
}
ul.tree {
  padding-left: 0;
  font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace;
  font-size: 0.9rem;
  line-height: 1.6;
}
ul.tree li {
  position: relative;
}
ul.tree ul > li::before {
  content: "";
  position: absolute;
  top: 0;
  left: -0.85rem;
  height: 100%;
  border-left: 1px solid #d0d7de;
}
ul.tree ul > li:last-child::before {
  height: 0.8rem;
}
ul.tree ul > li::after {
  content: "";
  position: absolute;
  top: 0.8rem;
  left: -0.85rem;
  width: 0.6rem;
  border-top: 1px solid #d0d7de;
}
ul.tree summary {
  cursor: pointer;
  list-style: none;
}
ul.tree summary::-webkit-details-marker {
  display: none;
}
ul.tree .tree-node.folder > details > summary > .tree-label::before {
  content: "\\1F4C2  ";
}
ul.tree .tree-node.folder > details:not([open]) > summary > .tree-label::before {
  content: "\\1F4C1  ";
}
ul.tree .tree-node.file > .tree-label::before {
  content: "\\1F4C4  ";
}
ul.tree .tree-node.folder > details > summary > .tree-label {
  font-weight: 600;
}
"""
