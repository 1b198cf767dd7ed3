"""
Chat workflow: agent context, LangGraph state, nodes, graph and session wrapper.
"""
