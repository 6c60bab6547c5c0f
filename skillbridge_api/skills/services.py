"""Static skill catalogue used for autocomplete and validation."""

_CATALOGUE = [
    # Frontend
    'React', 'Vue.js', 'Angular', 'TypeScript', 'JavaScript', 'HTML5', 'CSS3', 'Sass', 'Less',
    'Next.js', 'Nuxt.js', 'Gatsby', 'Tailwind CSS', 'Bootstrap', 'Material-UI', 'Ant Design',

    # Backend
    'Node.js', 'Express.js', 'NestJS', 'Python', 'Django', 'Flask', 'FastAPI', 'Java', 'Spring Boot',
    'C#', '.NET', 'ASP.NET Core', 'PHP', 'Laravel', 'Symfony', 'Ruby', 'Ruby on Rails', 'Go',

    # Databases
    'PostgreSQL', 'MySQL', 'MongoDB', 'Redis', 'SQLite', 'Oracle', 'SQL Server', 'DynamoDB',

    # Cloud & DevOps
    'AWS', 'Azure', 'Google Cloud', 'Docker', 'Kubernetes', 'Terraform', 'Jenkins', 'GitLab CI',
    'GitHub Actions', 'Ansible', 'Nginx', 'Apache',

    # Mobile
    'React Native', 'Flutter', 'Swift', 'Kotlin', 'Xamarin', 'Ionic',

    # Data Science & AI
    'Python', 'TensorFlow', 'PyTorch', 'Scikit-learn', 'Pandas', 'NumPy', 'Jupyter', 'R',
    'Machine Learning', 'Deep Learning', 'Computer Vision', 'NLP',

    # Blockchain
    'Solidity', 'Ethereum', 'Bitcoin', 'Hyperledger', 'Web3.js',

    # Other
    'GraphQL', 'REST API', 'WebSocket', 'Microservices', 'Serverless', 'GraphQL', 'gRPC',
    'Elasticsearch', 'Kafka', 'RabbitMQ', 'Redis', 'Memcached',
]

# first occurrence wins
PREDEFINED_SKILLS = tuple(dict.fromkeys(_CATALOGUE))

SKILL_CATEGORIES = {
    'Frontend': ['React', 'Vue.js', 'Angular', 'TypeScript', 'JavaScript', 'HTML5', 'CSS3'],
    'Backend': ['Node.js', 'Python', 'Java', 'C#', 'PHP', 'Ruby', 'Go'],
    'Database': ['PostgreSQL', 'MySQL', 'MongoDB', 'Redis'],
    'Cloud & DevOps': ['AWS', 'Azure', 'Docker', 'Kubernetes'],
    'Mobile': ['React Native', 'Flutter', 'Swift', 'Kotlin'],
    'Data Science': ['Python', 'TensorFlow', 'PyTorch', 'Machine Learning'],
    'Blockchain': ['Solidity', 'Ethereum', 'Web3.js'],
}

POPULAR_SKILLS = [
    'React', 'Node.js', 'TypeScript', 'Python', 'JavaScript', 'PostgreSQL',
    'AWS', 'Docker', 'MongoDB', 'Express.js', 'Vue.js', 'Angular',
]


class SkillsService:

    def get_all_skills(self):
        return list(PREDEFINED_SKILLS)

    def search_skills(self, query, limit=10):
        """Case-insensitive substring match; a blank query returns the first `limit` skills."""
        term = (query or '').strip().lower()
        if not term:
            return list(PREDEFINED_SKILLS[:limit])
        return [skill for skill in PREDEFINED_SKILLS if term in skill.lower()][:limit]

    def validate_skills(self, skills):
        known = set(PREDEFINED_SKILLS)
        return {
            'valid': [skill for skill in skills if skill in known],
            'invalid': [skill for skill in skills if skill not in known],
        }

    def get_skill_categories(self):
        return {name: list(skills) for name, skills in SKILL_CATEGORIES.items()}

    def get_popular_skills(self):
        return list(POPULAR_SKILLS)
