from setuptools import setup, find_packages


def parse_requirements():
    with open('requirements.txt') as file:
        requirements = [line.strip() for line in file.readlines() if line.strip()]
    return requirements


if __name__ == '__main__':
    setup(
        name='fslister',
        version='1.0',
        package_dir={'': '.'},
        packages=find_packages('.', exclude=['tests', 'tests.*']),
        python_requires='>=3.9',
        install_requires=parse_requirements(),
        extras_require={'test': ['pytest']},
        entry_points={'console_scripts': ['fslister=fslister.cli:main']}
    )
