"""
Shared prompt helpers
"""

from __future__ import annotations

REPORT_INSTRUCTIONS = (
    "Crie um conteúdo bem estruturado com títulos, subtítulos e parágrafos. "
    "Todos os elementos precisam ser formatados em HTML.\n"
    "O conteúdo gerado deve ser claro, com destaque para termos importantes, "
    "utilizando tags HTML como <h1>, <h2>, <p>, <strong>, <em>, etc.\n"
    "Em caso de gerar algum texto com alguma cor, use sempre este formato "
    '<span style="color: cor desejada"> mas com a cor que for definida abaixo.\n'
    "Aqui está o prompt do usuário:\n"
)


def format_report_prompt(prompt: str) -> str:
    """
    Wrap the user's ``prompt`` in the fixed HTML-formatting instructions.

    The user text goes last so colour or layout requests in it override the
    defaults above.
    """
    return REPORT_INSTRUCTIONS + prompt.strip()
