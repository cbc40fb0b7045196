"""SQL queries for vacancy services."""

_VACANCY_COLUMNS = """
        id,
        channel,
        text,
        url,
        position,
        employment_type,
        salary,
        sphere,
        created_at,
        updated_at
"""

# Query to get all vacancies, newest first
GET_ALL_VACANCIES = f"""
    SELECT {_VACANCY_COLUMNS}
    FROM public.vacancies
    ORDER BY created_at DESC, id DESC
"""

# Query to get a single vacancy by ID
GET_VACANCY_BY_ID = f"""
    SELECT {_VACANCY_COLUMNS}
    FROM public.vacancies
    WHERE id = %s
"""

# Query to check whether a vacancy with the given URL is already stored
CHECK_VACANCY_URL_EXISTS = """
    SELECT EXISTS (
        SELECT 1 FROM public.vacancies WHERE url = %s
    )
"""

# Insert a vacancy unless its URL is already stored.
# The unique constraint on url makes this safe against overlapping ingestion
# runs: the losing insert returns no row instead of creating a duplicate.
INSERT_VACANCY_IF_NEW = f"""
    INSERT INTO public.vacancies (
        channel,
        text,
        url,
        position,
        employment_type,
        salary,
        sphere
    ) VALUES (%s, %s, %s, %s, %s, %s, %s)
    ON CONFLICT (url) DO NOTHING
    RETURNING {_VACANCY_COLUMNS}
"""

# created_at is set once on insert and never updated
UPDATE_VACANCY = f"""
    UPDATE public.vacancies
    SET
        channel = %s,
        text = %s,
        url = %s,
        position = %s,
        employment_type = %s,
        salary = %s,
        sphere = %s,
        updated_at = NOW()
    WHERE id = %s
    RETURNING {_VACANCY_COLUMNS}
"""

DELETE_VACANCY = """
    DELETE FROM public.vacancies WHERE id = %s
    RETURNING id
"""

# Used by the health check endpoint
COUNT_VACANCIES = """
    SELECT COUNT(*) FROM public.vacancies
"""
