# NOTE: MODIFY TS ONLY WHEN U WANNA CHANGE THE OVERALL PARAMETERS OF THE PIPELINE.

DEFAULT_DATA_PATH = '2015.csv'

# two countries closer than this in happiness score get a similarity edge (strict <)
SIMILARITY_THRESHOLD = 1.0

# how many BFS sources brandes gets to process before we stop.
# 158 countries in the 2015 file so 200 means exact
DEFAULT_MAX_ITERATIONS = 200

# positional columns of the happiness csv. header names in the real file vary
# between years so we go by position, not by name
COLUMNS = [
    ('name', 'country name'),
    ('region', 'country region'),
    ('happiness_rank', 'happiness rank'),
    ('happiness_score', 'happiness score'),
    ('gdp', 'GDP'),
    ('health', 'health'),
    ('family', 'family'),
    ('government_corruption', 'government corruption'),
]

NUMERIC_FIELDS = {
    'happiness_rank', 'happiness_score', 'gdp',
    'health', 'family', 'government_corruption',
}

# edge policies, stored on every edge
REGION_POLICY = 'region'
SIMILARITY_POLICY = 'similarity'


# colours for the html graph. regions cycle through this if there are more than 10

REGION_PALETTE = [
    '#1a5276', '#2874a6', '#52be80', '#f4d03f', '#e67e22',
    '#e74c3c', '#8e44ad', '#16a085', '#7f8c8d', '#d35400',
]

# happiness bands, lower bound -> colour. checked top down
HAPPINESS_COLORS = [
    (7.0, '#27ae60'),   # very happy
    (6.0, '#2ecc71'),
    (5.0, '#f4d03f'),
    (4.0, '#e67e22'),
    (0.0, '#c0392b'),   # not so much
]

POLICY_COLORS = {
    REGION_POLICY: '#3498db',
    SIMILARITY_POLICY: '#95a5a6',
}

# pair connected by both policies
MIXED_EDGE_COLOR = '#8e44ad'
