"""Static airport reference table.

Used for:
- fallback directory when Duffel is unavailable or unconfigured
- seeding the ``airports`` table
"""

# (iata, icao, name, city, country_code, country_name, time_zone, latitude, longitude)
AIRPORTS: list[tuple] = [
    # United States
    ("JFK", "KJFK", "John F. Kennedy International Airport", "New York", "US", "United States", "America/New_York", 40.6413, -73.7781),
    ("LGA", "KLGA", "LaGuardia Airport", "New York", "US", "United States", "America/New_York", 40.7769, -73.8740),
    ("EWR", "KEWR", "Newark Liberty International Airport", "Newark", "US", "United States", "America/New_York", 40.6895, -74.1745),
    ("LAX", "KLAX", "Los Angeles International Airport", "Los Angeles", "US", "United States", "America/Los_Angeles", 33.9416, -118.4085),
    ("ORD", "KORD", "O'Hare International Airport", "Chicago", "US", "United States", "America/Chicago", 41.9742, -87.9073),
    ("MDW", "KMDW", "Chicago Midway International Airport", "Chicago", "US", "United States", "America/Chicago", 41.7868, -87.7522),
    ("ATL", "KATL", "Hartsfield-Jackson Atlanta International Airport", "Atlanta", "US", "United States", "America/New_York", 33.6407, -84.4277),
    ("DFW", "KDFW", "Dallas/Fort Worth International Airport", "Dallas", "US", "United States", "America/Chicago", 32.8998, -97.0403),
    ("DEN", "KDEN", "Denver International Airport", "Denver", "US", "United States", "America/Denver", 39.8561, -104.6737),
    ("SFO", "KSFO", "San Francisco International Airport", "San Francisco", "US", "United States", "America/Los_Angeles", 37.6213, -122.3790),
    ("SEA", "KSEA", "Seattle-Tacoma International Airport", "Seattle", "US", "United States", "America/Los_Angeles", 47.4502, -122.3088),
    ("LAS", "KLAS", "Harry Reid International Airport", "Las Vegas", "US", "United States", "America/Los_Angeles", 36.0840, -115.1537),
    ("MIA", "KMIA", "Miami International Airport", "Miami", "US", "United States", "America/New_York", 25.7959, -80.2870),
    ("BOS", "KBOS", "Logan International Airport", "Boston", "US", "United States", "America/New_York", 42.3656, -71.0096),
    ("PHX", "KPHX", "Phoenix Sky Harbor International Airport", "Phoenix", "US", "United States", "America/Phoenix", 33.4352, -112.0101),
    ("MCI", "KMCI", "Kansas City International Airport", "Kansas City", "US", "United States", "America/Chicago", 39.2976, -94.7139),
    # Canada
    ("YYZ", "CYYZ", "Toronto Pearson International Airport", "Toronto", "CA", "Canada", "America/Toronto", 43.6777, -79.6248),
    ("YVR", "CYVR", "Vancouver International Airport", "Vancouver", "CA", "Canada", "America/Vancouver", 49.1967, -123.1815),
    ("YUL", "CYUL", "Montréal-Trudeau International Airport", "Montreal", "CA", "Canada", "America/Toronto", 45.4706, -73.7408),
    # United Kingdom
    ("LHR", "EGLL", "London Heathrow Airport", "London", "GB", "United Kingdom", "Europe/London", 51.4700, -0.4543),
    ("LGW", "EGKK", "London Gatwick Airport", "London", "GB", "United Kingdom", "Europe/London", 51.1537, -0.1821),
    ("STN", "EGSS", "London Stansted Airport", "London", "GB", "United Kingdom", "Europe/London", 51.8860, 0.2389),
    ("LTN", "EGGW", "London Luton Airport", "London", "GB", "United Kingdom", "Europe/London", 51.8747, -0.3683),
    ("LCY", "EGLC", "London City Airport", "London", "GB", "United Kingdom", "Europe/London", 51.5048, 0.0495),
    ("MAN", "EGCC", "Manchester Airport", "Manchester", "GB", "United Kingdom", "Europe/London", 53.3588, -2.2727),
    ("EDI", "EGPH", "Edinburgh Airport", "Edinburgh", "GB", "United Kingdom", "Europe/London", 55.9508, -3.3615),
    ("BHX", "EGBB", "Birmingham Airport", "Birmingham", "GB", "United Kingdom", "Europe/London", 52.4539, -1.7480),
    ("GLA", "EGPF", "Glasgow Airport", "Glasgow", "GB", "United Kingdom", "Europe/London", 55.8719, -4.4331),
    # Europe
    ("CDG", "LFPG", "Charles de Gaulle Airport", "Paris", "FR", "France", "Europe/Paris", 49.0097, 2.5479),
    ("ORY", "LFPO", "Paris Orly Airport", "Paris", "FR", "France", "Europe/Paris", 48.7233, 2.3794),
    ("NCE", "LFMN", "Nice Côte d'Azur Airport", "Nice", "FR", "France", "Europe/Paris", 43.6584, 7.2159),
    ("FRA", "EDDF", "Frankfurt Airport", "Frankfurt", "DE", "Germany", "Europe/Berlin", 50.0379, 8.5622),
    ("MUC", "EDDM", "Munich Airport", "Munich", "DE", "Germany", "Europe/Berlin", 48.3537, 11.7750),
    ("BER", "EDDB", "Berlin Brandenburg Airport", "Berlin", "DE", "Germany", "Europe/Berlin", 52.3667, 13.5033),
    ("AMS", "EHAM", "Amsterdam Airport Schiphol", "Amsterdam", "NL", "Netherlands", "Europe/Amsterdam", 52.3105, 4.7683),
    ("MAD", "LEMD", "Madrid-Barajas Airport", "Madrid", "ES", "Spain", "Europe/Madrid", 40.4983, -3.5676),
    ("BCN", "LEBL", "Barcelona-El Prat Airport", "Barcelona", "ES", "Spain", "Europe/Madrid", 41.2974, 2.0833),
    ("VLC", "LEVC", "Valencia Airport", "Valencia", "ES", "Spain", "Europe/Madrid", 39.4893, -0.4816),
    ("FCO", "LIRF", "Leonardo da Vinci International Airport", "Rome", "IT", "Italy", "Europe/Rome", 41.8003, 12.2389),
    ("MXP", "LIMC", "Milan Malpensa Airport", "Milan", "IT", "Italy", "Europe/Rome", 45.6306, 8.7281),
    ("ZRH", "LSZH", "Zurich Airport", "Zurich", "CH", "Switzerland", "Europe/Zurich", 47.4582, 8.5555),
    ("VIE", "LOWW", "Vienna International Airport", "Vienna", "AT", "Austria", "Europe/Vienna", 48.1103, 16.5697),
    ("BRU", "EBBR", "Brussels Airport", "Brussels", "BE", "Belgium", "Europe/Brussels", 50.9010, 4.4856),
    ("DUB", "EIDW", "Dublin Airport", "Dublin", "IE", "Ireland", "Europe/Dublin", 53.4264, -6.2499),
    # Asia / Middle East / Africa
    ("NRT", "RJAA", "Narita International Airport", "Tokyo", "JP", "Japan", "Asia/Tokyo", 35.7720, 140.3929),
    ("HND", "RJTT", "Haneda Airport", "Tokyo", "JP", "Japan", "Asia/Tokyo", 35.5494, 139.7798),
    ("ICN", "RKSI", "Incheon International Airport", "Seoul", "KR", "South Korea", "Asia/Seoul", 37.4602, 126.4407),
    ("SIN", "WSSS", "Singapore Changi Airport", "Singapore", "SG", "Singapore", "Asia/Singapore", 1.3644, 103.9915),
    ("HKG", "VHHH", "Hong Kong International Airport", "Hong Kong", "HK", "Hong Kong", "Asia/Hong_Kong", 22.3080, 113.9185),
    ("PVG", "ZSPD", "Shanghai Pudong International Airport", "Shanghai", "CN", "China", "Asia/Shanghai", 31.1443, 121.8083),
    ("PEK", "ZBAA", "Beijing Capital International Airport", "Beijing", "CN", "China", "Asia/Shanghai", 40.0799, 116.6031),
    ("BKK", "VTBS", "Suvarnabhumi Airport", "Bangkok", "TH", "Thailand", "Asia/Bangkok", 13.6900, 100.7501),
    ("DXB", "OMDB", "Dubai International Airport", "Dubai", "AE", "United Arab Emirates", "Asia/Dubai", 25.2532, 55.3657),
    ("DOH", "OTHH", "Hamad International Airport", "Doha", "QA", "Qatar", "Asia/Qatar", 25.2731, 51.6081),
    ("JNB", "FAOR", "O.R. Tambo International Airport", "Johannesburg", "ZA", "South Africa", "Africa/Johannesburg", -26.1392, 28.2460),
    ("CPT", "FACT", "Cape Town International Airport", "Cape Town", "ZA", "South Africa", "Africa/Johannesburg", -33.9715, 18.6021),
    # Oceania
    ("SYD", "YSSY", "Sydney Kingsford Smith Airport", "Sydney", "AU", "Australia", "Australia/Sydney", -33.9399, 151.1753),
    ("MEL", "YMML", "Melbourne Airport", "Melbourne", "AU", "Australia", "Australia/Melbourne", -37.6690, 144.8410),
    # Latin America
    ("GRU", "SBGR", "São Paulo/Guarulhos International Airport", "São Paulo", "BR", "Brazil", "America/Sao_Paulo", -23.4356, -46.4731),
    ("MEX", "MMMX", "Mexico City International Airport", "Mexico City", "MX", "Mexico", "America/Mexico_City", 19.4361, -99.0719),
    ("LIM", "SPJC", "Jorge Chávez International Airport", "Lima", "PE", "Peru", "America/Lima", -12.0219, -77.1143),
    ("BOG", "SKBO", "El Dorado International Airport", "Bogotá", "CO", "Colombia", "America/Bogota", 4.7016, -74.1469),
    ("VLN", "SVVA", "Arturo Michelena International Airport", "Valencia", "VE", "Venezuela", "America/Caracas", 10.1497, -67.9284),
]

AIRPORT_FIELDS = (
    "iata_code", "icao_code", "name", "city_name", "country_code",
    "country_name", "time_zone", "latitude", "longitude",
)


def airport_rows() -> list[dict]:
    """The reference table as dicts keyed by :data:`AIRPORT_FIELDS`."""
    return [dict(zip(AIRPORT_FIELDS, row)) for row in AIRPORTS]
