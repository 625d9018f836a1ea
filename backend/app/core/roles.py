ROLE_MEMBER = "MEMBER"
ROLE_ADMIN = "ADMIN"

ALL_ROLES = {ROLE_MEMBER, ROLE_ADMIN}

DEPT_INTERCESSION = "INTERCESSION"
DEPT_FAMILY = "FAMILY"
DEPT_YOUTH = "YOUTH"

ALL_DEPARTMENTS = {DEPT_INTERCESSION, DEPT_FAMILY, DEPT_YOUTH}
