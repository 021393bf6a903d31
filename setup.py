from glob import glob
from setuptools import setup


setup(
    name='rpncalc',
    use_scm_version={
        # Source tarballs and plain checkouts carry no VCS metadata.
        'fallback_version': '0.1.0',
    },
    description='Multi-instance, thread-safe RPN calculator engine',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['rpncalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
