"""Spreadsheet header aliases, checked in order."""
from __future__ import annotations

START_COLUMNS = ("Tanggal_Mulai", "Tanggal Mulai", "Mulai", "Start Date")
END_COLUMNS = ("Tanggal_Selesai", "Tanggal Selesai", "Selesai", "End Date")

NAME_COLUMNS = (
    "Nama",
    "Nama Mahasiswa",
    "Nama Mahasiswa/i",
    "Nama Siswa",
    "Nama Peserta",
    "Student Name",
    "Nama_Mahasiswa",
    "Nama_Mahasiswa/i",
)

INSTITUTION_COLUMNS = (
    "Instansi",
    "Nama Instansi",
    "Nama Institusi",
    "Institusi",
    "Sekolah",
    "Sekolah/Universitas",
    "Company",
    "Perusahaan",
    "Nama Sekolah",
    "Nama_Perusahaan",
)

LEVEL_COLUMNS = (
    "Jenjang",
    "Tingkat Pendidikan",
    "Tingkat_Pendidikan",
    "Level Pendidikan",
    "Jenjang Pendidikan",
    "Pendidikan",
    "Level",
)

EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}
CSV_SUFFIXES = {".csv"}
