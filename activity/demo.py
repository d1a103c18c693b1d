from __future__ import annotations

from datetime import date
from typing import List

from .models import InternshipRecord


def build_demo_records() -> List[InternshipRecord]:
    rows = [
        ("Ayu Lestari", "SMK Negeri 1 Bandung", "SMK", date(2024, 1, 8), date(2024, 3, 29)),
        ("Budi Santoso", "Universitas Padjadjaran", "S1", date(2024, 2, 1), date(2024, 7, 31)),
        ("Citra Dewi", "Politeknik Negeri Jakarta", "", date(2024, 2, 15), None),
        ("Dimas Pratama", "SMK Telkom Malang", "Sekolah Menengah Kejuruan", date(2024, 4, 1), date(2024, 6, 28)),
        ("Eka Putri", "Institut Teknologi Bandung", "Universitas", date(2024, 5, 13), date(2024, 8, 30)),
        ("Fajar Nugroho", "", "D3", date(2024, 6, 3), date(2024, 9, 27)),
        ("Gita Maharani", "SMK Negeri 1 Bandung", "smk", date(2024, 7, 1), date(2024, 9, 30)),
        ("Hadi Wijaya", "Universitas Padjadjaran", "Sarjana", date(2024, 8, 19), None),
        ("Indah Sari", "SMA Negeri 3 Bogor", "SMA", date(2024, 9, 2), date(2024, 11, 29)),
        ("Joko Susilo", "Universitas Indonesia", "S2", date(2024, 10, 7), date(2025, 1, 31)),
    ]
    return [
        InternshipRecord(start=start, end=end, name=name, institution=institution, level=level)
        for name, institution, level, start, end in rows
    ]
