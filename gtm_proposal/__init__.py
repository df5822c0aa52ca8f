"""
GTM Proposal Workspace

An editable go-to-market proposal: budget scenarios with derived lead, CPL and
CAC projections, plus a versioned document that can be persisted locally,
shared as a link and exported to a file.
"""

__version__ = "0.1.0"
