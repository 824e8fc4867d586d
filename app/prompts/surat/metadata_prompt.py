# metadata_prompt.py
"""
Prompts for pulling structured metadata out of a letter, either from its
plain text or from a photo/scan of the document.
"""

from app.models.surat import CATEGORIES


def _category_choices(last_joiner: str = ", ") -> str:
    return ", ".join(CATEGORIES[:-1]) + last_joiner + CATEGORIES[-1]


def build_metadata_prompt(text: str) -> str:
    """
    Build the text-extraction prompt (five fields).

    Args:
        text: Raw letter text

    Returns:
        Complete prompt string
    """
    return (
        "Ekstrak informasi penting dari teks surat berikut dalam format JSON. Field yang dibutuhkan: \n"
        "- number (nomor surat)\n"
        "- sender (pengirim)\n"
        "- receiver (penerima)\n"
        "- title (perihal/judul singkat)\n"
        f"- category (pilih satu: {_category_choices()})\n"
        "\n"
        f"Teks surat: \n {text}"
    )


def build_document_prompt() -> str:
    """
    Build the instruction that accompanies an inline document image (seven fields).

    Returns:
        Complete prompt string
    """
    return (
        "Anda adalah asisten kearsipan digital profesional. Analisis dokumen/gambar surat ini "
        "dan ekstrak informasi berikut dalam format JSON:\n"
        "- number: nomor surat resmi (jika tidak ditemukan, biarkan kosong)\n"
        "- title: perihal atau judul surat yang sangat ringkas\n"
        "- sender: nama instansi atau orang pengirim\n"
        "- receiver: nama instansi atau orang penerima\n"
        "- date: tanggal surat dalam format YYYY-MM-DD\n"
        f"- category: pilih satu yang paling cocok ({_category_choices(', atau ')})\n"
        "- content: transkrip lengkap teks yang ada dalam surat\n"
        "\n"
        "PENTING: Berikan hasil hanya dalam format JSON yang valid."
    )
