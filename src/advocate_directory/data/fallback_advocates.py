"""Bundled advocate dataset.

Served when the relational store is unreachable or still empty, and the
payload the seed command writes into the store.
"""

from functools import lru_cache
from typing import Tuple

from ..listing.models import Advocate

SPECIALTIES = [
    "Bipolar",
    "LGBTQ",
    "Medication/Prescribing",
    "Suicide History/Attempts",
    "General Mental Health (anxiety, depression, stress, grief, life transitions)",
    "Men's issues",
    "Relationship Issues (family, friends, couple, etc)",
    "Trauma & PTSD",
    "Personality disorders",
    "Personal growth",
    "Substance use/abuse",
    "Pediatrics",
    "Women's issues (post-partum, infertility, family planning)",
    "Chronic pain",
    "Weight loss & nutrition",
    "Eating disorders",
    "Diabetic Diabetes management",
    "Coaching (leadership, career, academic and wellness)",
    "Life coaching",
    "Obsessive-compulsive disorders",
    "Neuropsychological evaluations & testing (ADHD testing)",
    "Attention and Hyperactivity (ADHD)",
    "Sleep issues",
    "Schizophrenia and psychotic disorders",
    "Learning disorders",
    "Domestic abuse",
]

FALLBACK_ADVOCATE_DATA = [
    {
        "firstName": "John",
        "lastName": "Doe",
        "city": "New York",
        "degree": "MD",
        "specialties": [SPECIALTIES[0], SPECIALTIES[2], SPECIALTIES[4]],
        "yearsOfExperience": 10,
        "phoneNumber": 5551234567,
    },
    {
        "firstName": "Jane",
        "lastName": "Smith",
        "city": "Los Angeles",
        "degree": "PhD",
        "specialties": [SPECIALTIES[7], SPECIALTIES[8]],
        "yearsOfExperience": 8,
        "phoneNumber": 5559876543,
    },
    {
        "firstName": "Alice",
        "lastName": "Johnson",
        "city": "Chicago",
        "degree": "MSW",
        "specialties": [SPECIALTIES[6], SPECIALTIES[12], SPECIALTIES[25]],
        "yearsOfExperience": 5,
        "phoneNumber": 5554567890,
    },
    {
        "firstName": "Michael",
        "lastName": "Brown",
        "city": "Houston",
        "degree": "MD",
        "specialties": [SPECIALTIES[13], SPECIALTIES[14], SPECIALTIES[16]],
        "yearsOfExperience": 12,
        "phoneNumber": 5556543210,
    },
    {
        "firstName": "Emily",
        "lastName": "Davis",
        "city": "Phoenix",
        "degree": "PhD",
        "specialties": [SPECIALTIES[20], SPECIALTIES[21], SPECIALTIES[24]],
        "yearsOfExperience": 7,
        "phoneNumber": 5553210987,
    },
    {
        "firstName": "Chris",
        "lastName": "Martinez",
        "city": "Philadelphia",
        "degree": "MSW",
        "specialties": [SPECIALTIES[5], SPECIALTIES[10]],
        "yearsOfExperience": 9,
        "phoneNumber": 5557890123,
    },
    {
        "firstName": "Jessica",
        "lastName": "Taylor",
        "city": "San Antonio",
        "degree": "MD",
        "specialties": [SPECIALTIES[11], SPECIALTIES[15], SPECIALTIES[22]],
        "yearsOfExperience": 11,
        "phoneNumber": 5554561234,
    },
    {
        "firstName": "David",
        "lastName": "Harris",
        "city": "San Diego",
        "degree": "PhD",
        "specialties": [SPECIALTIES[3], SPECIALTIES[23]],
        "yearsOfExperience": 6,
        "phoneNumber": 5557896543,
    },
    {
        "firstName": "Laura",
        "lastName": "Clark",
        "city": "Dallas",
        "degree": "MSW",
        "specialties": [SPECIALTIES[1], SPECIALTIES[4], SPECIALTIES[9]],
        "yearsOfExperience": 4,
        "phoneNumber": 5550123456,
    },
    {
        "firstName": "Daniel",
        "lastName": "Lewis",
        "city": "San Jose",
        "degree": "MD",
        "specialties": [SPECIALTIES[2], SPECIALTIES[19]],
        "yearsOfExperience": 13,
        "phoneNumber": 5553217654,
    },
    {
        "firstName": "Sarah",
        "lastName": "Lee",
        "city": "Austin",
        "degree": "PhD",
        "specialties": [SPECIALTIES[17], SPECIALTIES[18]],
        "yearsOfExperience": 10,
        "phoneNumber": 5551238765,
    },
    {
        "firstName": "James",
        "lastName": "King",
        "city": "Jacksonville",
        "degree": "MSW",
        "specialties": [SPECIALTIES[6], SPECIALTIES[7], SPECIALTIES[10]],
        "yearsOfExperience": 5,
        "phoneNumber": 5556540987,
    },
    {
        "firstName": "Megan",
        "lastName": "Green",
        "city": "San Francisco",
        "degree": "MD",
        "specialties": [SPECIALTIES[0], SPECIALTIES[16], SPECIALTIES[22]],
        "yearsOfExperience": 14,
        "phoneNumber": 5559873456,
    },
    {
        "firstName": "Joshua",
        "lastName": "Walker",
        "city": "Columbus",
        "degree": "PhD",
        "specialties": [SPECIALTIES[12], SPECIALTIES[24]],
        "yearsOfExperience": 9,
        "phoneNumber": 5556781234,
    },
    {
        "firstName": "Amanda",
        "lastName": "Hall",
        "city": "Fort Worth",
        "degree": "MSW",
        "specialties": [SPECIALTIES[4], SPECIALTIES[8], SPECIALTIES[17]],
        "yearsOfExperience": 3,
        "phoneNumber": 5559872345,
    },
]


@lru_cache(maxsize=1)
def load_fallback_advocates() -> Tuple[Advocate, ...]:
    """Bundled dataset as validated, id-less Advocate records (cached)."""
    return tuple(Advocate.model_validate(item) for item in FALLBACK_ADVOCATE_DATA)
