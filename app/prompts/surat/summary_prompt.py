# summary_prompt.py
"""
Prompt for the one-sentence letter summary.
"""


def build_summary_prompt(content: str) -> str:
    return (
        "Ringkaslah isi surat berikut ini menjadi satu kalimat yang padat dan informatif "
        f"dalam Bahasa Indonesia: \n\n {content}"
    )
