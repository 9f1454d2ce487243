# regional_cities.py
# Cities and observation stations that may be labeled on the regional map.
#
# REGIONAL_CITIES is the curated list; entries win over stations when two
# would overlap, so keep the well-known names here. An entry may carry its own
# "min_separation" (degrees) to keep it further from its neighbours.
#
# STATION_INFO fills the gaps between curated cities. Station entries are
# spaced by the region's target distance.

REGIONAL_CITIES = [
    # Continental US
    {"city": "Atlanta", "lat": 33.7490, "lon": -84.3880},
    {"city": "Boston", "lat": 42.3601, "lon": -71.0589},
    {"city": "Chicago", "lat": 41.8781, "lon": -87.6298},
    {"city": "Dallas", "lat": 32.7767, "lon": -96.7970},
    {"city": "Denver", "lat": 39.7392, "lon": -104.9903},
    {"city": "Detroit", "lat": 42.3314, "lon": -83.0458},
    {"city": "Houston", "lat": 29.7604, "lon": -95.3698},
    {"city": "Kansas City", "lat": 39.0997, "lon": -94.5786},
    {"city": "Las Vegas", "lat": 36.1699, "lon": -115.1398},
    {"city": "Los Angeles", "lat": 34.0522, "lon": -118.2437},
    {"city": "Miami", "lat": 25.7617, "lon": -80.1918},
    {"city": "Minneapolis", "lat": 44.9778, "lon": -93.2650},
    {"city": "New Orleans", "lat": 29.9511, "lon": -90.0715},
    {"city": "New York", "lat": 40.7128, "lon": -74.0060},
    {"city": "Phoenix", "lat": 33.4484, "lon": -112.0740},
    {"city": "Salt Lake City", "lat": 40.7608, "lon": -111.8910},
    {"city": "San Francisco", "lat": 37.7749, "lon": -122.4194},
    {"city": "Seattle", "lat": 47.6062, "lon": -122.3321},
    {"city": "Washington, DC", "lat": 38.9072, "lon": -77.0369},
    {"city": "St. Louis", "lat": 38.6270, "lon": -90.1994},
    {"city": "Nashville", "lat": 36.1627, "lon": -86.7816},
    {"city": "Charlotte", "lat": 35.2271, "lon": -80.8431},
    {"city": "Albuquerque", "lat": 35.0844, "lon": -106.6504},
    {"city": "Billings", "lat": 45.7833, "lon": -108.5007},
    {"city": "Boise", "lat": 43.6150, "lon": -116.2023},
    {"city": "Omaha", "lat": 41.2565, "lon": -95.9345},
    {"city": "Oklahoma City", "lat": 35.4676, "lon": -97.5164},
    {"city": "Memphis", "lat": 35.1495, "lon": -90.0490},
    {"city": "Cincinnati", "lat": 39.1031, "lon": -84.5120},
    {"city": "Pittsburgh", "lat": 40.4406, "lon": -79.9959},
    {"city": "Jacksonville", "lat": 30.3322, "lon": -81.6557},
    {"city": "Tampa", "lat": 27.9506, "lon": -82.4572},
    {"city": "San Antonio", "lat": 29.4241, "lon": -98.4936},
    {"city": "El Paso", "lat": 31.7619, "lon": -106.4850},
    {"city": "Portland", "lat": 45.5152, "lon": -122.6784},
    {"city": "Sacramento", "lat": 38.5816, "lon": -121.4944},
    {"city": "Fargo", "lat": 46.8772, "lon": -96.7898},
    {"city": "Milwaukee", "lat": 43.0389, "lon": -87.9065},
    {"city": "Indianapolis", "lat": 39.7684, "lon": -86.1581},
    {"city": "Buffalo", "lat": 42.8864, "lon": -78.8784},
    {"city": "Little Rock", "lat": 34.7465, "lon": -92.2896},
    {"city": "Birmingham", "lat": 33.5186, "lon": -86.8104},
    {"city": "Raleigh", "lat": 35.7796, "lon": -78.6382},
    {"city": "Winston-Salem", "lat": 36.0999, "lon": -80.2442},
    {"city": "Spokane", "lat": 47.6588, "lon": -117.4260},
    {"city": "Cheyenne", "lat": 41.1400, "lon": -104.8202},
    {"city": "Rapid City", "lat": 44.0805, "lon": -103.2310},
    {"city": "Des Moines", "lat": 41.5868, "lon": -93.6250},
    {"city": "Wichita", "lat": 37.6872, "lon": -97.3301},
    {"city": "Amarillo", "lat": 35.2220, "lon": -101.8313},
    {"city": "Louisville", "lat": 38.2527, "lon": -85.7585},
    {"city": "Cleveland", "lat": 41.4993, "lon": -81.6944},
    {"city": "Bangor", "lat": 44.8012, "lon": -68.7778},
    {"city": "Reno", "lat": 39.5296, "lon": -119.8138},
    {"city": "Flagstaff", "lat": 35.1983, "lon": -111.6513},
    {"city": "Great Falls", "lat": 47.4942, "lon": -111.2833},
    {"city": "Duluth", "lat": 46.7867, "lon": -92.1005},
    # Alaska
    {"city": "Anchorage", "lat": 61.2181, "lon": -149.9003, "min_separation": 2},
    {"city": "Fairbanks", "lat": 64.8378, "lon": -147.7164, "min_separation": 2},
    {"city": "Juneau", "lat": 58.3019, "lon": -134.4197},
    {"city": "Nome", "lat": 64.5011, "lon": -165.4064},
    {"city": "Utqiagvik", "lat": 71.2906, "lon": -156.7886},
    {"city": "Bethel", "lat": 60.7922, "lon": -161.7558},
    {"city": "Kodiak", "lat": 57.7900, "lon": -152.4072},
    {"city": "Ketchikan", "lat": 55.3422, "lon": -131.6461},
    {"city": "Kotzebue", "lat": 66.8983, "lon": -162.5967},
    {"city": "Valdez", "lat": 61.1308, "lon": -146.3483},
    {"city": "Dillingham", "lat": 59.0397, "lon": -158.4575},
    {"city": "Sitka", "lat": 57.0531, "lon": -135.3300},
    # Hawaii
    {"city": "Honolulu", "lat": 21.3069, "lon": -157.8583},
    {"city": "Hilo", "lat": 19.7074, "lon": -155.0885},
    {"city": "Kahului", "lat": 20.8893, "lon": -156.4729},
    {"city": "Lihue", "lat": 21.9811, "lon": -159.3711},
    {"city": "Kailua-Kona", "lat": 19.6400, "lon": -155.9969},
    {"city": "Kaunakakai", "lat": 21.0906, "lon": -157.0226},
]

STATION_INFO = {
    "KORD": {"id": "KORD", "city": "Chicago/O'Hare", "state": "IL", "lat": 41.9786, "lon": -87.9048},
    "KMDW": {"id": "KMDW", "city": "Chicago/Midway", "state": "IL", "lat": 41.7842, "lon": -87.7553},
    "KRFD": {"id": "KRFD", "city": "Rockford", "state": "IL", "lat": 42.1954, "lon": -89.0972},
    "KPIA": {"id": "KPIA", "city": "Peoria", "state": "IL", "lat": 40.6642, "lon": -89.6933},
    "KSPI": {"id": "KSPI", "city": "Springfield", "state": "IL", "lat": 39.8441, "lon": -89.6779},
    "KMSP": {"id": "KMSP", "city": "Minneapolis/St Paul", "state": "MN", "lat": 44.8831, "lon": -93.2289},
    "KSTL": {"id": "KSTL", "city": "St. Louis/Lambert", "state": "MO", "lat": 38.7525, "lon": -90.3736},
    "KMCI": {"id": "KMCI", "city": "Kansas City Intl", "state": "MO", "lat": 39.2976, "lon": -94.7139},
    "KDTW": {"id": "KDTW", "city": "Detroit/Metro", "state": "MI", "lat": 42.2124, "lon": -83.3534},
    "KGRR": {"id": "KGRR", "city": "Grand Rapids", "state": "MI", "lat": 42.8808, "lon": -85.5228},
    "KCLE": {"id": "KCLE", "city": "Cleveland-Hopkins", "state": "OH", "lat": 41.4117, "lon": -81.8498},
    "KCVG": {"id": "KCVG", "city": "Covington", "state": "KY", "lat": 39.0488, "lon": -84.6678},
    "KIND": {"id": "KIND", "city": "Indianapolis", "state": "IN", "lat": 39.7173, "lon": -86.2944},
    "KSBN": {"id": "KSBN", "city": "South Bend", "state": "IN", "lat": 41.7087, "lon": -86.3173},
    "KFWA": {"id": "KFWA", "city": "Fort Wayne", "state": "IN", "lat": 40.9785, "lon": -85.1951},
    "KMKE": {"id": "KMKE", "city": "Milwaukee", "state": "WI", "lat": 42.9472, "lon": -87.8966},
    "KGRB": {"id": "KGRB", "city": "Green Bay", "state": "WI", "lat": 44.4851, "lon": -88.1296},
    "KLSE": {"id": "KLSE", "city": "La Crosse", "state": "WI", "lat": 43.8792, "lon": -91.2566},
    "KDSM": {"id": "KDSM", "city": "Des Moines", "state": "IA", "lat": 41.5340, "lon": -93.6631},
    "KOMA": {"id": "KOMA", "city": "Omaha/Eppley", "state": "NE", "lat": 41.3032, "lon": -95.8941},
    "KFAR": {"id": "KFAR", "city": "Fargo", "state": "ND", "lat": 46.9207, "lon": -96.8158},
    "KBIS": {"id": "KBIS", "city": "Bismarck", "state": "ND", "lat": 46.7727, "lon": -100.7460},
    "KRAP": {"id": "KRAP", "city": "Rapid City", "state": "SD", "lat": 44.0453, "lon": -103.0574},
    "KDEN": {"id": "KDEN", "city": "Denver Intl", "state": "CO", "lat": 39.8561, "lon": -104.6737},
    "KSLC": {"id": "KSLC", "city": "Salt Lake City", "state": "UT", "lat": 40.7884, "lon": -111.9778},
    "KPHX": {"id": "KPHX", "city": "Phoenix/Sky Harbor", "state": "AZ", "lat": 33.4343, "lon": -112.0116},
    "KLAS": {"id": "KLAS", "city": "Las Vegas", "state": "NV", "lat": 36.0840, "lon": -115.1537},
    "KLAX": {"id": "KLAX", "city": "Los Angeles Intl", "state": "CA", "lat": 33.9416, "lon": -118.4085},
    "KSFO": {"id": "KSFO", "city": "San Francisco Intl", "state": "CA", "lat": 37.6213, "lon": -122.3790},
    "KSEA": {"id": "KSEA", "city": "Seattle-Tacoma", "state": "WA", "lat": 47.4502, "lon": -122.3088},
    "KPDX": {"id": "KPDX", "city": "Portland", "state": "OR", "lat": 45.5898, "lon": -122.5951},
    "KBOI": {"id": "KBOI", "city": "Boise", "state": "ID", "lat": 43.5644, "lon": -116.2228},
    "KABQ": {"id": "KABQ", "city": "Albuquerque", "state": "NM", "lat": 35.0402, "lon": -106.6090},
    "KDFW": {"id": "KDFW", "city": "Dallas/Fort Worth", "state": "TX", "lat": 32.8998, "lon": -97.0403},
    "KIAH": {"id": "KIAH", "city": "Houston/Bush", "state": "TX", "lat": 29.9902, "lon": -95.3368},
    "KMSY": {"id": "KMSY", "city": "New Orleans", "state": "LA", "lat": 29.9934, "lon": -90.2580},
    "KATL": {"id": "KATL", "city": "Atlanta", "state": "GA", "lat": 33.6407, "lon": -84.4277},
    "KMIA": {"id": "KMIA", "city": "Miami", "state": "FL", "lat": 25.7959, "lon": -80.2870},
    "KJFK": {"id": "KJFK", "city": "New York/JFK", "state": "NY", "lat": 40.6413, "lon": -73.7781},
    "KBOS": {"id": "KBOS", "city": "Boston/Logan", "state": "MA", "lat": 42.3656, "lon": -71.0096},
    "KDCA": {"id": "KDCA", "city": "Washington/National", "state": "VA", "lat": 38.8512, "lon": -77.0402},
    "KPIT": {"id": "KPIT", "city": "Pittsburgh", "state": "PA", "lat": 40.4915, "lon": -80.2329},
    "KBNA": {"id": "KBNA", "city": "Nashville", "state": "TN", "lat": 36.1263, "lon": -86.6774},
    "KMEM": {"id": "KMEM", "city": "Memphis", "state": "TN", "lat": 35.0421, "lon": -89.9792},
    "KOKC": {"id": "KOKC", "city": "Oklahoma City", "state": "OK", "lat": 35.3931, "lon": -97.6007},
    "KBIL": {"id": "KBIL", "city": "Billings", "state": "MT", "lat": 45.8077, "lon": -108.5429},
    "PANC": {"id": "PANC", "city": "Anchorage", "state": "AK", "lat": 61.1743, "lon": -149.9962},
    "PAFA": {"id": "PAFA", "city": "Fairbanks", "state": "AK", "lat": 64.8151, "lon": -147.8561},
    "PAJN": {"id": "PAJN", "city": "Juneau", "state": "AK", "lat": 58.3550, "lon": -134.5763},
    "PAOM": {"id": "PAOM", "city": "Nome", "state": "AK", "lat": 64.5122, "lon": -165.4453},
    "PABR": {"id": "PABR", "city": "Utqiagvik", "state": "AK", "lat": 71.2854, "lon": -156.7660},
    "PABE": {"id": "PABE", "city": "Bethel", "state": "AK", "lat": 60.7798, "lon": -161.8380},
    "PAKN": {"id": "PAKN", "city": "King Salmon", "state": "AK", "lat": 58.6768, "lon": -156.6492},
    "PAOT": {"id": "PAOT", "city": "Kotzebue", "state": "AK", "lat": 66.8847, "lon": -162.5985},
    "PAYA": {"id": "PAYA", "city": "Yakutat", "state": "AK", "lat": 59.5033, "lon": -139.6603},
    "PAMC": {"id": "PAMC", "city": "McGrath", "state": "AK", "lat": 62.9529, "lon": -155.6056},
    "PHNL": {"id": "PHNL", "city": "Honolulu", "state": "HI", "lat": 21.3245, "lon": -157.9251},
    "PHTO": {"id": "PHTO", "city": "Hilo", "state": "HI", "lat": 19.7203, "lon": -155.0485},
    "PHOG": {"id": "PHOG", "city": "Kahului", "state": "HI", "lat": 20.8986, "lon": -156.4305},
    "PHLI": {"id": "PHLI", "city": "Lihue", "state": "HI", "lat": 21.9760, "lon": -159.3390},
    "PHKO": {"id": "PHKO", "city": "Kailua/Kona", "state": "HI", "lat": 19.7388, "lon": -156.0456},
    "PHMK": {"id": "PHMK", "city": "Molokai", "state": "HI", "lat": 21.1529, "lon": -157.0963},
}
