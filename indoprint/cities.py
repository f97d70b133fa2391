"""The built-in table of supported Indonesian cities."""

from __future__ import annotations

from indoprint.models import City

CITIES: tuple[City, ...] = (
    City(1, "Jakarta", "DKI Jakarta", -6.2088, 106.8456),
    City(2, "Surabaya", "Jawa Timur", -7.2504, 112.7688),
    City(3, "Bandung", "Jawa Barat", -6.9271, 107.6411),
    City(4, "Medan", "Sumatera Utara", 3.1952, 98.6722),
    City(5, "Bekasi", "Jawa Barat", -6.2349, 106.9896),
    City(6, "Depok", "Jawa Barat", -6.4029, 106.8231),
    City(7, "Tangerang", "Banten", -6.1728, 106.6326),
    City(8, "Tangerang Selatan", "Banten", -6.2957, 106.7338),
    City(9, "Semarang", "Jawa Tengah", -6.9667, 110.4167),
    City(10, "Makassar", "Sulawesi Selatan", -5.3520, 119.4432),
    City(11, "Palembang", "Sumatera Selatan", -2.9760, 104.7553),
    City(12, "Batam", "Kepulauan Riau", 1.1271, 104.0073),
    City(13, "Bogor", "Jawa Barat", -6.6007, 106.7957),
    City(14, "Bandar Lampung", "Lampung", -5.3971, 105.2668),
    City(15, "Pekanbaru", "Riau", 0.5071, 101.4472),
    City(16, "Denpasar", "Bali", -8.6705, 115.2126),
    City(17, "Malang", "Jawa Timur", -7.9827, 112.6345),
    City(18, "Yogyakarta", "DI Yogyakarta", -7.7956, 110.3695),
    City(19, "Padang", "Sumatera Barat", -0.9492, 100.4172),
    City(20, "Manado", "Sulawesi Utara", 1.4748, 124.8628),
    City(21, "Banjarmasin", "Kalimantan Selatan", -3.3286, 114.5904),
    City(22, "Pontianak", "Kalimantan Barat", -0.0263, 109.3425),
    City(23, "Balikpapan", "Kalimantan Timur", -1.2671, 116.8326),
    City(24, "Samarinda", "Kalimantan Timur", -0.5, 117.1667),
    City(25, "Mataram", "NTB", -8.6500, 116.6333),
    City(26, "Kupang", "NTT", -10.1667, 123.6167),
    City(27, "Bengkulu", "Bengkulu", -3.8003, 102.2718),
    City(28, "Jambi", "Jambi", -1.6114, 103.6111),
    City(29, "Surakarta", "Jawa Tengah", -7.5505, 110.8063),
    City(30, "Magelang", "Jawa Tengah", -7.4744, 110.2144),
    City(31, "Cirebon", "Jawa Barat", -6.7049, 108.4449),
    City(32, "Tasikmalaya", "Jawa Barat", -7.3245, 108.2256),
    City(33, "Cimahi", "Jawa Barat", -6.8869, 107.5436),
    City(34, "Kediri", "Jawa Timur", -7.2452, 111.9015),
    City(35, "Madiun", "Jawa Timur", -7.6309, 111.5278),
    City(36, "Tegal", "Jawa Tengah", -6.8689, 109.1433),
    City(37, "Pekalongan", "Jawa Tengah", -6.8902, 109.6867),
    City(38, "Probolinggo", "Jawa Timur", -7.7252, 112.7920),
    City(39, "Pasuruan", "Jawa Timur", -7.6428, 112.9064),
    City(40, "Mojokerto", "Jawa Timur", -7.4728, 112.4292),
    City(41, "Serang", "Banten", -6.4042, 106.1496),
    City(42, "Ambon", "Maluku", -3.6959, 128.1814),
    City(43, "Ternate", "Maluku Utara", 0.7934, 127.3795),
    City(44, "Jayapura", "Papua", -2.5897, 140.6695),
    City(45, "Manokwari", "Papua Barat", -0.8667, 131.0836),
    City(46, "Gorontalo", "Gorontalo", 0.5272, 123.0564),
    City(47, "Kendari", "Sulawesi Tenggara", -3.9693, 122.5105),
    City(48, "Palu", "Sulawesi Tengah", -0.8917, 119.8701),
    City(49, "Banda Aceh", "Aceh", 5.5577, 95.3222),
    City(50, "Solo", "Jawa Tengah", -7.5505, 110.8063),
)