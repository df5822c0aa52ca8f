"""
Use Case Implementations

Proposal workspace: the calls the editing shell makes into the core, from
startup initialization through sharing, export and import.
"""

from .proposal_workspace import ProposalWorkspaceUseCase, ExportedSnapshot

__all__ = [
    "ProposalWorkspaceUseCase",
    "ExportedSnapshot"
]
