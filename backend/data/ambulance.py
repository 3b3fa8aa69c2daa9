# data/ambulance.py
"""Static ambulance service directory (fallback when live search is unavailable)"""

AMBULANCE_SERVICES = [
    # Jamshedpur ambulance services
    {
        "id": "amb-jamshedpur-1",
        "name": "Tata Main Hospital Ambulance Service",
        "address": "C Rd, Northern Town, Bistupur, Jamshedpur, Jharkhand 831001",
        "phone": "+91 6572431101",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 22.7914,
        "longitude": 86.1887,
        "service_type": "private",
        "services": ["Basic Life Support", "Advanced Life Support", "Patient Transport"],
        "emergency_response": True,
        "city_area": "Bistupur"
    },
    {
        "id": "amb-jamshedpur-2",
        "name": "MGM Hospital Ambulance",
        "address": "Sakchi, Jamshedpur, Jharkhand 831001",
        "phone": "+91 6572231051",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 22.8002,
        "longitude": 86.2037,
        "service_type": "government",
        "services": ["Basic Life Support", "Emergency Transport", "Trauma Response"],
        "emergency_response": True,
        "city_area": "Sakchi"
    },
    {
        "id": "amb-jamshedpur-3",
        "name": "108 Emergency Service - Jamshedpur",
        "address": "Jamshedpur, Jharkhand 831001",
        "phone": "108",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 22.8015,
        "longitude": 86.2029,
        "service_type": "government",
        "services": ["Emergency Response", "Basic Life Support", "Free Service"],
        "emergency_response": True,
        "city_area": "All Jamshedpur"
    },
    {
        "id": "amb-jamshedpur-4",
        "name": "Red Cross Ambulance Service",
        "address": "Bistupur, Jamshedpur, Jharkhand 831001",
        "phone": "+91 6572211919",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 22.7920,
        "longitude": 86.1890,
        "service_type": "ngo",
        "services": ["Basic Life Support", "Patient Transport", "Disaster Response"],
        "emergency_response": True,
        "city_area": "Bistupur"
    },
    {
        "id": "amb-jamshedpur-5",
        "name": "Mercy Hospital Ambulance",
        "address": "NH-33, Baridih, Jamshedpur, Jharkhand 831017",
        "phone": "+91 6572482304",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 22.8217,
        "longitude": 86.2402,
        "service_type": "private",
        "services": ["Basic Life Support", "Advanced Life Support", "Patient Transport"],
        "emergency_response": True,
        "city_area": "Baridih"
    },

    # Delhi ambulance services
    {
        "id": "amb-delhi-1",
        "name": "CATS Ambulance Service",
        "address": "Delhi",
        "phone": "102",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 28.6139,
        "longitude": 77.2090,
        "service_type": "government",
        "services": ["Basic Life Support", "Advanced Life Support", "Emergency Transport"],
        "emergency_response": True,
        "city_area": "All Delhi"
    },
    {
        "id": "amb-delhi-2",
        "name": "AIIMS Ambulance Service",
        "address": "Ansari Nagar East, New Delhi, Delhi 110029",
        "phone": "+91 1126588500",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 28.5672,
        "longitude": 77.2100,
        "service_type": "government",
        "services": ["Advanced Life Support", "Critical Care Transport", "Emergency Response"],
        "emergency_response": True,
        "city_area": "South Delhi"
    },
    {
        "id": "amb-delhi-3",
        "name": "108 Emergency Service - Delhi",
        "address": "Delhi",
        "phone": "108",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 28.6129,
        "longitude": 77.2295,
        "service_type": "government",
        "services": ["Basic Life Support", "Emergency Response", "Free Service"],
        "emergency_response": True,
        "city_area": "All Delhi"
    },

    # Additional Delhi services
    {
        "id": "amb-delhi-4",
        "name": "Fortis Hospital Ambulance Service",
        "address": "Fortis Hospital, Sector 62, Noida, UP",
        "phone": "+91 1204351095",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 28.6139,
        "longitude": 77.3682,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Emergency Response"],
        "emergency_response": True,
        "city_area": "Noida"
    },
    {
        "id": "amb-delhi-5",
        "name": "Max Hospital Ambulance",
        "address": "Press Enclave Road, Saket, New Delhi, Delhi 110017",
        "phone": "+91 1126515050",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 28.5272,
        "longitude": 77.2193,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Patient Transport"],
        "emergency_response": True,
        "city_area": "South Delhi"
    },

    # Mumbai ambulance services
    {
        "id": "amb-mumbai-1",
        "name": "108 Emergency Service - Mumbai",
        "address": "Mumbai, Maharashtra",
        "phone": "108",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 19.0760,
        "longitude": 72.8777,
        "service_type": "government",
        "services": ["Basic Life Support", "Emergency Response", "Free Service"],
        "emergency_response": True,
        "city_area": "All Mumbai"
    },
    {
        "id": "amb-mumbai-2",
        "name": "Lilavati Hospital Ambulance",
        "address": "A-791, Bandra Reclamation, Bandra West, Mumbai 400050",
        "phone": "+91 2226751000",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 19.0510,
        "longitude": 72.8258,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Emergency Response"],
        "emergency_response": True,
        "city_area": "Bandra"
    },
    {
        "id": "amb-mumbai-3",
        "name": "1298 Ambulance Service",
        "address": "Mumbai, Maharashtra",
        "phone": "1298",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 19.0760,
        "longitude": 72.8777,
        "service_type": "private",
        "services": ["Basic Life Support", "Advanced Life Support", "Patient Transport"],
        "emergency_response": True,
        "city_area": "All Mumbai"
    },

    # Additional Mumbai services
    {
        "id": "amb-mumbai-4",
        "name": "Nanavati Hospital Ambulance",
        "address": "S.V. Road, Vile Parle West, Mumbai, Maharashtra 400056",
        "phone": "+91 2243479999",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 19.0879,
        "longitude": 72.8439,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Emergency Response"],
        "emergency_response": True,
        "city_area": "Vile Parle"
    },
    {
        "id": "amb-mumbai-5",
        "name": "Hinduja Hospital Ambulance",
        "address": "Veer Savarkar Marg, Mahim, Mumbai, Maharashtra 400016",
        "phone": "+91 2224452222",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 19.0317,
        "longitude": 72.8392,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Patient Transport"],
        "emergency_response": True,
        "city_area": "Mahim"
    },

    # Bangalore ambulance services
    {
        "id": "amb-bangalore-1",
        "name": "108 Emergency Service - Bangalore",
        "address": "Bangalore, Karnataka",
        "phone": "108",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 12.9716,
        "longitude": 77.5946,
        "service_type": "government",
        "services": ["Basic Life Support", "Emergency Response", "Free Service"],
        "emergency_response": True,
        "city_area": "All Bangalore"
    },
    {
        "id": "amb-bangalore-2",
        "name": "Manipal Hospital Ambulance",
        "address": "98, HAL Airport Road, Bengaluru, Karnataka 560017",
        "phone": "+91 8025023800",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 12.9582,
        "longitude": 77.6484,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Emergency Response"],
        "emergency_response": True,
        "city_area": "HAL Airport Road"
    },

    # Additional Bangalore services
    {
        "id": "amb-bangalore-3",
        "name": "Fortis Hospital Ambulance",
        "address": "Bannerghatta Road, Bangalore, Karnataka 560076",
        "phone": "+91 8066214444",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 12.8916,
        "longitude": 77.5959,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Emergency Response"],
        "emergency_response": True,
        "city_area": "Bannerghatta Road"
    },
    {
        "id": "amb-bangalore-4",
        "name": "Narayana Health Ambulance",
        "address": "258/A, Bommasandra Industrial Area, Anekal Taluk, Bangalore, Karnataka 560099",
        "phone": "+91 8067106510",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 12.8081,
        "longitude": 77.6979,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Patient Transport"],
        "emergency_response": True,
        "city_area": "Bommasandra"
    },

    # Chennai ambulance services
    {
        "id": "amb-chennai-1",
        "name": "108 Emergency Service - Chennai",
        "address": "Chennai, Tamil Nadu",
        "phone": "108",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 13.0827,
        "longitude": 80.2707,
        "service_type": "government",
        "services": ["Basic Life Support", "Emergency Response", "Free Service"],
        "emergency_response": True,
        "city_area": "All Chennai"
    },
    {
        "id": "amb-chennai-2",
        "name": "Apollo Hospitals Ambulance",
        "address": "21, Greams Lane, Off Greams Road, Chennai 600006",
        "phone": "+91 4428290200",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 13.0614,
        "longitude": 80.2569,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Emergency Response"],
        "emergency_response": True,
        "city_area": "Greams Road"
    },

    # Additional Chennai services
    {
        "id": "amb-chennai-3",
        "name": "Fortis Malar Hospital Ambulance",
        "address": "52, 1st Main Road, Gandhi Nagar, Adyar, Chennai, Tamil Nadu 600020",
        "phone": "+91 4445890000",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 13.0023,
        "longitude": 80.2526,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Emergency Response"],
        "emergency_response": True,
        "city_area": "Adyar"
    },
    {
        "id": "amb-chennai-4",
        "name": "Stanley Medical College Hospital Ambulance",
        "address": "Old Jail Road, Royapuram, Chennai, Tamil Nadu 600001",
        "phone": "+91 4425281351",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 13.1011,
        "longitude": 80.2923,
        "service_type": "government",
        "services": ["Basic Life Support", "Emergency Response", "Free Service"],
        "emergency_response": True,
        "city_area": "Royapuram"
    },

    # Kolkata ambulance services
    {
        "id": "amb-kolkata-1",
        "name": "108 Emergency Service - Kolkata",
        "address": "Kolkata, West Bengal",
        "phone": "108",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 22.5726,
        "longitude": 88.3639,
        "service_type": "government",
        "services": ["Basic Life Support", "Emergency Response", "Free Service"],
        "emergency_response": True,
        "city_area": "All Kolkata"
    },
    {
        "id": "amb-kolkata-2",
        "name": "SSKM Hospital Ambulance",
        "address": "244, AJC Bose Road, Kolkata 700020",
        "phone": "+91 3322040122",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 22.5396,
        "longitude": 88.3421,
        "service_type": "government",
        "services": ["Basic Life Support", "Advanced Life Support", "Emergency Response"],
        "emergency_response": True,
        "city_area": "AJC Bose Road"
    },

    # Additional Kolkata services
    {
        "id": "amb-kolkata-3",
        "name": "AMRI Hospital Ambulance",
        "address": "JC 16-17, Sector-III, Salt Lake City, Kolkata, West Bengal 700098",
        "phone": "+91 3323212228",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 22.5842,
        "longitude": 88.4185,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Patient Transport"],
        "emergency_response": True,
        "city_area": "Salt Lake"
    },
    {
        "id": "amb-kolkata-4",
        "name": "Fortis Hospital Ambulance",
        "address": "730, Anandapur, E.M. Bypass Road, Kolkata, West Bengal 700107",
        "phone": "+91 3366284444",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 22.5128,
        "longitude": 88.3986,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Emergency Response"],
        "emergency_response": True,
        "city_area": "Anandapur"
    },

    # Pune ambulance services
    {
        "id": "amb-pune-1",
        "name": "108 Emergency Service - Pune",
        "address": "Pune, Maharashtra",
        "phone": "108",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 18.5204,
        "longitude": 73.8567,
        "service_type": "government",
        "services": ["Basic Life Support", "Emergency Response", "Free Service"],
        "emergency_response": True,
        "city_area": "All Pune"
    },
    {
        "id": "amb-pune-2",
        "name": "Ruby Hall Clinic Ambulance",
        "address": "40, Sassoon Road, Pune, Maharashtra 411001",
        "phone": "+91 2026123391",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 18.5338,
        "longitude": 73.8771,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Emergency Response"],
        "emergency_response": True,
        "city_area": "Sassoon Road"
    },
    {
        "id": "amb-pune-3",
        "name": "Jehangir Hospital Ambulance",
        "address": "32, Sassoon Road, Pune, Maharashtra 411001",
        "phone": "+91 2026128500",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 18.5321,
        "longitude": 73.8748,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Patient Transport"],
        "emergency_response": True,
        "city_area": "Sassoon Road"
    },

    # Hyderabad ambulance services
    {
        "id": "amb-hyderabad-1",
        "name": "108 Emergency Service - Hyderabad",
        "address": "Hyderabad, Telangana",
        "phone": "108",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 17.3850,
        "longitude": 78.4867,
        "service_type": "government",
        "services": ["Basic Life Support", "Emergency Response", "Free Service"],
        "emergency_response": True,
        "city_area": "All Hyderabad"
    },
    {
        "id": "amb-hyderabad-2",
        "name": "Apollo Hospital Ambulance",
        "address": "Film Nagar, Jubilee Hills, Hyderabad, Telangana 500033",
        "phone": "+91 4023607777",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 17.4138,
        "longitude": 78.4071,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Emergency Response"],
        "emergency_response": True,
        "city_area": "Jubilee Hills"
    },
    {
        "id": "amb-hyderabad-3",
        "name": "KIMS Hospital Ambulance",
        "address": "1-8-31/1, Minister Road, Secunderabad, Telangana 500003",
        "phone": "+91 4044885000",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 17.4400,
        "longitude": 78.4982,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Patient Transport"],
        "emergency_response": True,
        "city_area": "Secunderabad"
    },

    # Ahmedabad ambulance services
    {
        "id": "amb-ahmedabad-1",
        "name": "108 Emergency Service - Ahmedabad",
        "address": "Ahmedabad, Gujarat",
        "phone": "108",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 23.0225,
        "longitude": 72.5714,
        "service_type": "government",
        "services": ["Basic Life Support", "Emergency Response", "Free Service"],
        "emergency_response": True,
        "city_area": "All Ahmedabad"
    },
    {
        "id": "amb-ahmedabad-2",
        "name": "Apollo Hospital Ambulance",
        "address": "Plot No.1 A, Bhat, GIDC Estate, Gandhinagar, Gujarat 382428",
        "phone": "+91 7966701800",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 23.0973,
        "longitude": 72.6309,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Emergency Response"],
        "emergency_response": True,
        "city_area": "Gandhinagar"
    },
    {
        "id": "amb-ahmedabad-3",
        "name": "Sterling Hospital Ambulance",
        "address": "Sterling Hospital Road, Gurukul, Ahmedabad, Gujarat 380052",
        "phone": "+91 7966868000",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 23.0467,
        "longitude": 72.5416,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Patient Transport"],
        "emergency_response": True,
        "city_area": "Gurukul"
    },

    # Chandigarh ambulance services
    {
        "id": "amb-chandigarh-1",
        "name": "108 Emergency Service - Chandigarh",
        "address": "Chandigarh",
        "phone": "108",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 30.7333,
        "longitude": 76.7794,
        "service_type": "government",
        "services": ["Basic Life Support", "Emergency Response", "Free Service"],
        "emergency_response": True,
        "city_area": "All Chandigarh"
    },
    {
        "id": "amb-chandigarh-2",
        "name": "PGIMER Ambulance Service",
        "address": "Sector 12, Chandigarh, 160012",
        "phone": "+91 1722756565",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 30.7659,
        "longitude": 76.7764,
        "service_type": "government",
        "services": ["Advanced Life Support", "Critical Care Transport", "Emergency Response"],
        "emergency_response": True,
        "city_area": "Sector 12"
    },
    {
        "id": "amb-chandigarh-3",
        "name": "Fortis Hospital Ambulance",
        "address": "Fortis Hospital, Phase 8, Mohali, Punjab 160062",
        "phone": "+91 1724692222",
        "available": True,
        "operating_hours": "24 hours",
        "latitude": 30.7128,
        "longitude": 76.7090,
        "service_type": "private",
        "services": ["Advanced Life Support", "Critical Care Transport", "Patient Transport"],
        "emergency_response": True,
        "city_area": "Mohali"
    },
]
