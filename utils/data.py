"""
Data Management Module - Authored portfolio content and the read-only catalog
The catalog is built once per application and never mutated afterwards.
"""

from models import Photo, Poster, Project


GENEZIPPERS_SITE = 'https://www.cs.carleton.edu/cs_comps/2526/genezippers_web/website/'

PROJECTS = (
    Project(
        id='genezippers',
        title='GeneZippers: DNA Compression',
        subtitle='From Bases to Bits: An Analysis of Early DNA Compression Algorithms',
        tag='Research',
        description=(
            'Analysis of early DNA compression algorithms comparing Huffman Coding, '
            'DNAzip, and Biocompress 1 for genomic data.'
        ),
        overview=(
            'This project evaluates three distinct data compression strategies to assess '
            'their efficacy in handling massive genomic datasets by comparing a general '
            'text-based approach (Huffman Coding) against two specialized DNA compressors: '
            'DNAzip (reference-based) and Biocompress 1 (non-reference-based).'
        ),
        role=(
            'I focused on implementing and analyzing DNAzip, a reference-based DNA '
            'compression algorithm. This involved understanding the algorithm\'s approach '
            'to leveraging sequence similarity and evaluating its performance across '
            'different genomic datasets.'
        ),
        technologies=('Python', 'Bioinformatics', 'Data Compression', 'Algorithm Analysis'),
        live_link=GENEZIPPERS_SITE,
        code_link='https://github.com/Rawleo/genezippers_comps',
        paper_link=f'{GENEZIPPERS_SITE}paper.html',
        posters=(
            Poster(name='Gavin: Biocompress 1', url=f'{GENEZIPPERS_SITE}img/posters/Saxer_Poster.pdf'),
            Poster(name='Jared: DNAzip', url=f'{GENEZIPPERS_SITE}img/posters/ArroyoRuiz_Poster.pdf'),
            Poster(name='Ryan: DNAzip', url=f'{GENEZIPPERS_SITE}img/posters/Son_Poster.pdf'),
        ),
    ),
    Project(
        id='portfolio',
        title='Portfolio Website',
        subtitle='Modern, High-Performance Web Development',
        tag='Web App',
        description=(
            'A fast, server-rendered portfolio website built with Python and Flask, '
            'featuring modern design and seamless navigation.'
        ),
        overview=(
            'Built to keep a personal site small and easy to maintain. Pages are rendered '
            'from a fixed in-memory catalog, routing is handled by Flask blueprints, and a '
            'tiny script keeps in-page anchors and the navigation state in sync.'
        ),
        role='Full-Stack Developer',
        technologies=('Python', 'Flask', 'Jinja2', 'CSS', 'JavaScript'),
        live_link='https://rawleo.github.io/home/',
        code_link='https://github.com/Rawleo/home',
    ),
)

PHOTOS = (
    Photo(src='images/temple-photo.jpg', alt='Temple at sunrise', caption='Angkor Wat, Cambodia'),
)


def _find_duplicates(values):
    seen = set()
    duplicates = []
    for value in values:
        if value in seen and value not in duplicates:
            duplicates.append(value)
        seen.add(value)
    return duplicates


class ProjectCatalog:
    """
    Read-only collection of Project records

    Args:
        projects: Iterable of Project records, in display order

    Raises:
        ValueError: If project ids are not unique, or a project lists
            two posters with the same name
    """

    def __init__(self, projects=PROJECTS):
        self._projects = tuple(projects)

        duplicate_ids = _find_duplicates(p.id for p in self._projects)
        if duplicate_ids:
            raise ValueError(f"Duplicate project ids in catalog: {', '.join(duplicate_ids)}")

        for project in self._projects:
            if project.posters is None:
                continue
            duplicate_posters = _find_duplicates(p.name for p in project.posters)
            if duplicate_posters:
                raise ValueError(
                    f"Project '{project.id}' has duplicate poster names: {', '.join(duplicate_posters)}")

    def __len__(self):
        return len(self._projects)

    def __iter__(self):
        return iter(self._projects)

    def list_projects(self):
        """All projects in authored order"""
        return self._projects

    def get_project_by_id(self, project_id):
        """
        Look up a project by id

        Returns:
            Project or None: First project whose id equals ``project_id``.
            Unknown ids are a normal outcome and never raise.
        """
        return next((p for p in self._projects if p.id == project_id), None)

    def is_found(self, project_id):
        return self.get_project_by_id(project_id) is not None
