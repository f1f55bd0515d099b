import setuptools

setuptools.setup(name='mhlog',
                 packages=setuptools.find_packages(exclude=('tests', 'tests.*')),
                 version='0.1.0',
                 description='A daily mental health journal',
                 long_description='''
# mhlog

A terminal journal for daily mood, emotions, stress level and notes.

Entries are kept in a CSV file; the weekly average stress level can be
printed or plotted.
                 ''',
                 long_description_content_type='text/markdown',
                 include_package_data=True,
                 python_requires='>=3.7',
                 install_requires=[
                     'numpy',
                     'pandas',
                     'matplotlib',
                     ],
                 extras_require={
                     'test': ['pytest'],
                 },
                 entry_points={
                     'console_scripts': [
                         'mhlog = mhlog:main',
                     ],
                 },
                 classifiers=(
                     "Programming Language :: Python :: 3.7",
                     "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
                     "Operating System :: OS Independent",
                     "Development Status :: 4 - Beta",
                 ),
                 )
