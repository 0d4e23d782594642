# jobboard/constants.py

# employment types a posting may carry (empty / None means unset)
JOB_TYPES = ("Full-time", "Part-time", "Contract", "Internship")

# "posted" label given to postings created on the client
JUST_CREATED_LABEL = "Just now"

# card fallbacks when a posting leaves the field empty
DEFAULT_EXPERIENCE_LABEL = "1-2 yrs"
DEFAULT_JOB_TYPE_LABEL = "Onsite"
DEFAULT_SALARY_LABEL = "12 LPA"

# 1 LPA (lakh per annum) = 100000
LAKH = 100000
