"""
Worked examples, one module per SOLID principle.
Each module shows a violation first and the corrected design after it.
"""

SRP = "SRP"
OCP = "OCP"
LSP = "LSP"
ISP = "ISP"
DIP = "DIP"

PRINCIPLE_CODES = (SRP, OCP, LSP, ISP, DIP)

__all__ = ['SRP', 'OCP', 'LSP', 'ISP', 'DIP', 'PRINCIPLE_CODES']
