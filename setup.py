from setuptools import setup
setup (name='JointEE',
    version='1.0.0',
    packages=['JointEE', 'JointEE.Core', 'JointEE.FeatureBuilders', 'JointEE.ExampleWriters', 'JointEE.Utils'],
    install_requires=['networkx'],
    extras_require={'test':['pytest']},
    python_requires='>=3.8',
    entry_points={'console_scripts':['jointee-features=JointEE.buildFeatures:main']},
    description='Global features for joint event extraction',
    license='GPL3',
    platforms='UNIX',
)
