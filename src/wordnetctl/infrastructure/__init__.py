"""Infrastructure layer — input parsing, lexical index, graph analysis view.

This layer depends on stdlib, third-party libs (NetworkX), and the domain
layer. It must never import from services, commands, or output.
The service layer bridges between the WordNet facade and the CLI.
"""
