# (code, name, city, state)
INDIAN_RAILWAY_STATIONS = [
    ("NDLS", "New Delhi", "Delhi", "Delhi"),
    ("CST", "Chhatrapati Shivaji Terminus", "Mumbai", "Maharashtra"),
    ("CSTM", "Mumbai CST", "Mumbai", "Maharashtra"),
    ("BCT", "Mumbai Central", "Mumbai", "Maharashtra"),
    ("LTT", "Lokmanya Tilak Terminus", "Mumbai", "Maharashtra"),
    ("BYC", "Bellary Junction", "Bellary", "Karnataka"),
    ("MAS", "Chennai Central", "Chennai", "Tamil Nadu"),
    ("SBC", "KSR Bengaluru", "Bengaluru", "Karnataka"),
    ("HWH", "Howrah Junction", "Kolkata", "West Bengal"),
    ("KOAA", "Kolkata", "Kolkata", "West Bengal"),
    ("SC", "Secunderabad Junction", "Hyderabad", "Telangana"),
    ("HYB", "Hyderabad Deccan", "Hyderabad", "Telangana"),
    ("AGC", "Agra Cantt", "Agra", "Uttar Pradesh"),
    ("LKO", "Lucknow", "Lucknow", "Uttar Pradesh"),
    ("CNB", "Kanpur Central", "Kanpur", "Uttar Pradesh"),
    ("PNBE", "Patna Junction", "Patna", "Bihar"),
    ("ASR", "Amritsar Junction", "Amritsar", "Punjab"),
    ("JAT", "Jammu Tawi", "Jammu", "Jammu and Kashmir"),
    ("CDG", "Chandigarh", "Chandigarh", "Chandigarh"),
    ("DLI", "Old Delhi Junction", "Delhi", "Delhi"),
    ("NZM", "Hazrat Nizamuddin", "Delhi", "Delhi"),
    ("ANVT", "Anand Vihar Terminal", "Delhi", "Delhi"),
    ("ADI", "Ahmedabad Junction", "Ahmedabad", "Gujarat"),
    ("SURAT", "Surat", "Surat", "Gujarat"),
    ("BRC", "Vadodara Junction", "Vadodara", "Gujarat"),
    ("JP", "Jaipur Junction", "Jaipur", "Rajasthan"),
    ("JU", "Jodhpur Junction", "Jodhpur", "Rajasthan"),
    ("UDZ", "Udaipur City", "Udaipur", "Rajasthan"),
    ("PUNE", "Pune Junction", "Pune", "Maharashtra"),
    ("NGP", "Nagpur", "Nagpur", "Maharashtra"),
    ("CBE", "Coimbatore Junction", "Coimbatore", "Tamil Nadu"),
    ("MDU", "Madurai Junction", "Madurai", "Tamil Nadu"),
    ("TVC", "Trivandrum Central", "Thiruvananthapuram", "Kerala"),
    ("ERS", "Ernakulam Junction", "Kochi", "Kerala"),
    ("CLT", "Kozhikode", "Kozhikode", "Kerala"),
    ("MYS", "Mysore Junction", "Mysore", "Karnataka"),
    ("YPR", "Yesvantpur Junction", "Bengaluru", "Karnataka"),
    ("VSKP", "Visakhapatnam", "Visakhapatnam", "Andhra Pradesh"),
    ("BZA", "Vijayawada Junction", "Vijayawada", "Andhra Pradesh"),
    ("SDAH", "Sealdah", "Kolkata", "West Bengal"),
    ("BBS", "Bhubaneswar", "Bhubaneswar", "Odisha"),
    ("PURI", "Puri", "Puri", "Odisha"),
    ("GHY", "Guwahati", "Guwahati", "Assam"),
    ("RNC", "Ranchi Junction", "Ranchi", "Jharkhand"),
    ("BPL", "Bhopal Junction", "Bhopal", "Madhya Pradesh"),
    ("INDB", "Indore Junction", "Indore", "Madhya Pradesh"),
    ("DBRG", "Dibrugarh", "Dibrugarh", "Assam"),
    ("GKP", "Gorakhpur Junction", "Gorakhpur", "Uttar Pradesh"),
    ("ALD", "Allahabad Junction", "Prayagraj", "Uttar Pradesh"),
    ("DDN", "Dehradun", "Dehradun", "Uttarakhand"),
    ("HW", "Haridwar Junction", "Haridwar", "Uttarakhand"),
    ("SVDK", "Shri Mata Vaishno Devi Katra", "Katra", "Jammu and Kashmir"),
    ("UHL", "Una Himachal", "Una", "Himachal Pradesh"),
    ("MMCT", "Mumbai Central", "Mumbai", "Maharashtra"),
    ("ST", "Surat", "Surat", "Gujarat"),
    ("RTM", "Ratlam Junction", "Ratlam", "Madhya Pradesh"),
]
